"""Route Modules: one file per concern.

Invariants:
    - Each module defines its own APIRouter
    - client must be included before demo (demo owns the catch-all path)
    - Routes are plain Starlette routes added with methods=None, so every
      HTTP method (TRACE, PROPFIND, ...) reaches the endpoint
"""
