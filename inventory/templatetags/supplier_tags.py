from datetime import datetime
from urllib.parse import urlsplit

from django import template
from django.template.defaultfilters import date as date_filter
from django.utils.html import format_html

from inventory.models import Status

register = template.Library()

EMPTY = "—"
LINK_SCHEMES = {"http", "https"}


@register.simple_tag
def status_badge(status):
    """Render ``status`` (a :class:`Status` or its value) as a badge."""
    if not isinstance(status, Status):
        status = Status(status)
    return format_html('<span class="{}">{}</span>', status.badge_class, status.label)


@register.simple_tag
def render_cell(column, value):
    if value is None or value == "":
        return format_html('<span class="muted">{}</span>', EMPTY)
    if isinstance(value, Status):
        return status_badge(value)
    if isinstance(value, datetime):
        return date_filter(value, "M j, Y")
    if column.key == "website":
        if urlsplit(str(value)).scheme.lower() not in LINK_SCHEMES:
            return value
        return format_html('<a href="{}" target="_blank" rel="noopener">{}</a>', value, value)
    if column.key == "email":
        return format_html('<a href="mailto:{}">{}</a>', value, value)
    return value
