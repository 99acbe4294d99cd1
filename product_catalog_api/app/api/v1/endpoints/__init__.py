"""
Endpoint subpackage for API v1.

Each module defines an APIRouter for one domain (products,
categories).  The routers are aggregated in ``router.py``.
"""
