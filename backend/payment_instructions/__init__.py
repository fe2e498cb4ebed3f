"""Payment Instructions Service — parse, validate and apply free-text transfer instructions.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
