"""
Service layer abstraction.

The stores own the in-memory records and their identifier counters;
``CatalogService`` holds the logic that involves more than one store.
Route handlers receive these objects through dependencies, so a
persistent backend could replace the stores without touching the API
handlers.
"""
