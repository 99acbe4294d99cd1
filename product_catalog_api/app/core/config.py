"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration at all.  Tests and embedding
code may construct their own ``Settings`` and hand it to
``create_app``.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Product Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty only console logging is
    # configured.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # Pagination defaults for ``GET /products/page``.  ``max_page_size``
    # caps the ``size`` query parameter.
    default_page_size: int = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))
    max_page_size: int = int(os.getenv("MAX_PAGE_SIZE", "100"))

    # Default threshold for ``GET /products/low-stock`` when the client
    # does not pass one.
    low_stock_threshold: int = int(os.getenv("LOW_STOCK_THRESHOLD", "10"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
