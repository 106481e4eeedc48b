"""Domain layer (pure game logic).

- Keep board rules, move validation and outcome detection here.
- Avoid I/O: no DB sessions, no HTTP/FastAPI, no scheduler.
- Prefer deterministic functions (clock/random passed in as arguments).
"""
