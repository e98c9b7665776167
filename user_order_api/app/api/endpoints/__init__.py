"""
Endpoint subpackage.

Each module in this package defines an APIRouter for one resource.  The
routers are aggregated per service in ``api/router.py``.
"""
