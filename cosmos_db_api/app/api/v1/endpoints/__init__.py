"""
Endpoint subpackage for API v1.

Each module defines an APIRouter for one resource family (items,
courses, admin).  The routers are aggregated in ``router.py``.
"""
