from .bulk_forms import BulkUploadForm
from .supplier_forms import SupplierForm

__all__ = ["BulkUploadForm", "SupplierForm"]
