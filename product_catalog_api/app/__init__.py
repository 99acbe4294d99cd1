"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules.  Records live in the stores under ``services``, request
and response shapes in ``schemas`` and the HTTP routes in ``api``.
Versioning is handled by grouping routers under ``api/<version>/``.
"""

from .main import app, create_app  # noqa: F401
