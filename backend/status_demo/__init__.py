"""Status Demo Package: HTTP status codes and content negotiation by example.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
