"""Infrastructure Layer — cross-cutting concerns kept out of the pure core.

Invariants:
    - Infrastructure never imports from core/ operations
    - Handlers are installed here, never inside core modules
"""
