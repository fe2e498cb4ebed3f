"""Core Layer — pure instruction parsing, rule validation and ledger arithmetic.

Invariants:
    - No module in core/ imports from services/, api/, schemas/ or infrastructure/
    - All functions are pure and deterministic (the clock is passed in, never read)

Design Decisions:
    - Functional core separated from imperative shell: the service layer reads
      the clock, times stages and logs; core only computes
"""
