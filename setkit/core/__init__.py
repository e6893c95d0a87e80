"""Core Layer — pure set operations, no IO, no config, no handlers.

Invariants:
    - No module in core/ imports from config or infrastructure/
    - Every function is pure, except take_random (removes one element)

Design Decisions:
    - Free functions over subclassing set: works on set, frozenset and dict views alike
    - SetBasics wrapper offers the same operations as methods for fluent call sites
"""
