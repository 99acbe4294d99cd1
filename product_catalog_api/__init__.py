"""Product Catalog API: an in-memory product catalogue served with FastAPI."""
