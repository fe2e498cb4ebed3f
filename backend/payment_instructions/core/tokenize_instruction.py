"""Tokenizer — split a raw instruction into whitespace-delimited tokens.

Invariants:
    - Total function: never raises, empty/whitespace-only input yields []
    - Case is preserved (account identifiers are case-sensitive)
    - Tabs are normalized to spaces before splitting
"""


def tokenize(instruction: str | None) -> list[str]:
    """Return the non-empty tokens of an instruction, in order."""
    if instruction is None:
        return []
    return str(instruction).replace("\t", " ").split()
