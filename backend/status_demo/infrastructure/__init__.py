"""Infrastructure Layer: logging setup and static file loading.

Invariants:
    - Only this layer touches the filesystem
"""
