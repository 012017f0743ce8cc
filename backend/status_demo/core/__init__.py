"""Core Layer: pure functions and value types, no IO.

Invariants:
    - Nothing here imports FastAPI, Starlette or uvicorn
    - Every handler is a pure function of a DemoRequest
"""
