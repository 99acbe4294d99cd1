"""
API package containing versioned routes.

Version subpackages such as ``v1`` expose a top-level ``router``
which includes all of their domain endpoints.  ``hello`` holds the
unversioned greeting routes and ``dependencies`` the functions that
hand the stores to route handlers.
"""
