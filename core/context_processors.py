from django.urls import reverse

NAV_SECTIONS = [
    ("Overview", [("Dashboard", "dashboard"), ("Reports", "reports")]),
    (
        "Procurement",
        [
            ("Purchases", "purchases"),
            ("Suppliers", "suppliers_list"),
            ("Suppliers (Alt)", "suppliers_alternative"),
            ("Suppliers (Clean)", "suppliers_clean"),
        ],
    ),
    ("Production", [("Recipes", "recipes"), ("Batches", "batches"), ("Sales", "sales")]),
]


def navigation(request):
    """Expose sidebar links with the active entry flagged."""
    path = request.path
    sections = []
    for title, links in NAV_SECTIONS:
        items = []
        for label, name in links:
            url = reverse(name)
            active = path == url if url == "/" else path.startswith(url)
            items.append({"label": label, "url": url, "active": active})
        sections.append({"title": title, "links": items})
    return {"nav_sections": sections}
