"""Service Layer - one module per resource, plain async functions.

Invariants:
    - Every function takes the AsyncSession as an argument (no module state)
    - Services raise core/errors.py types; routes never catch them
"""
