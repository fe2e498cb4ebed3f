"""Tokenizer — tests for whitespace splitting.

Tests cover:
    - Runs of spaces and tabs collapse
    - Case is preserved
    - Empty, whitespace-only and None input yield []
"""

from payment_instructions.core.tokenize_instruction import tokenize


def test_splits_on_single_spaces():
    assert tokenize("DEBIT 30 USD") == ["DEBIT", "30", "USD"]


def test_collapses_runs_of_spaces_and_tabs():
    assert tokenize("  DEBIT\t\t30   USD\t") == ["DEBIT", "30", "USD"]


def test_preserves_case():
    assert tokenize("debit 1 usd FROM ACCOUNT AcC-1") == [
        "debit", "1", "usd", "FROM", "ACCOUNT", "AcC-1",
    ]


def test_empty_input_yields_no_tokens():
    assert tokenize("") == []


def test_whitespace_only_yields_no_tokens():
    assert tokenize(" \t  \t") == []


def test_none_yields_no_tokens():
    assert tokenize(None) == []
