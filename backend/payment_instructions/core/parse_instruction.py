"""Grammar Matcher — recognize the DEBIT-first and CREDIT-first instruction shapes.

Grammar:
    DEBIT  <amount> <CUR> FROM ACCOUNT <debit>  FOR CREDIT TO ACCOUNT <credit> [ON <date>]
    CREDIT <amount> <CUR> TO ACCOUNT <credit>   FOR DEBIT FROM ACCOUNT <debit> [ON <date>]

Invariants:
    - Keywords match case-insensitively; account ids are taken verbatim
    - Amount and currency are positional (tokens 1 and 2) and checked before
      any clause search
    - Each anchor search returns the first occurrence at or after a cursor that
      only moves forward; an account id equal to a keyword is NOT special-cased
    - Missing anchor -> SY01, anchor followed by wrong token -> SY02,
      anchor present but required token missing -> SY03
    - Every rejection carries an empty accounts list

Design Decisions:
    - Linear scan with keyword anchors over a general parser: two fixed
      alternatives and one optional trailing clause, no backtracking needed
    - Clause table per TransactionType: both shapes share one matcher
"""

from typing import NamedTuple

from payment_instructions.core.domain_types import (
    Keyword,
    StatusCode,
    TransactionType,
)
from payment_instructions.core.instruction_types import (
    ParsedInstruction,
    ParseResult,
    Rejected,
)
from payment_instructions.core.status_messages import reason_for
from payment_instructions.core.validate_fields import (
    normalize_currency,
    parse_amount,
)

AMOUNT_INDEX = 1
CURRENCY_INDEX = 2
FIRST_CLAUSE_INDEX = 3


class _Clause(NamedTuple):
    anchor: Keyword
    followers: tuple[Keyword, ...]
    target: str  # ParsedInstruction attribute receiving the account id


_CLAUSES: dict[TransactionType, tuple[_Clause, _Clause]] = {
    TransactionType.DEBIT: (
        _Clause(Keyword.FROM, (Keyword.ACCOUNT,), "debit_account_id"),
        _Clause(
            Keyword.FOR,
            (Keyword.CREDIT, Keyword.TO, Keyword.ACCOUNT),
            "credit_account_id",
        ),
    ),
    TransactionType.CREDIT: (
        _Clause(Keyword.TO, (Keyword.ACCOUNT,), "credit_account_id"),
        _Clause(
            Keyword.FOR,
            (Keyword.DEBIT, Keyword.FROM, Keyword.ACCOUNT),
            "debit_account_id",
        ),
    ),
}


def _reject(parsed: ParsedInstruction, code: StatusCode) -> ParseResult:
    return ParseResult(parsed, Rejected(code, reason_for(code)))


def find_keyword(lowered: list[str], keyword: Keyword, start: int) -> int:
    """Index of the first `keyword` at or after `start`, or -1."""
    for index in range(start, len(lowered)):
        if lowered[index] == keyword.value:
            return index
    return -1


def match_clause(
    tokens: list[str], lowered: list[str], clause: _Clause, cursor: int,
) -> tuple[str, int] | StatusCode:
    """Match `<anchor> <followers...> <id>` from cursor.

    Returns (account_id, next_cursor) or the status code of the failure.
    """
    anchor_at = find_keyword(lowered, clause.anchor, cursor)
    if anchor_at == -1:
        return StatusCode.MISSING_KEYWORD

    for offset, keyword in enumerate(clause.followers, start=1):
        position = anchor_at + offset
        if position >= len(lowered) or lowered[position] != keyword.value:
            return StatusCode.INVALID_KEYWORD_ORDER

    id_at = anchor_at + len(clause.followers) + 1
    if id_at >= len(tokens):
        return StatusCode.MALFORMED_INSTRUCTION
    return tokens[id_at], id_at + 1


def parse_instruction(tokens: list[str]) -> ParseResult:
    """Grammar-match a token list. Stops at the first failure."""
    parsed = ParsedInstruction()
    if not tokens:
        return _reject(parsed, StatusCode.MALFORMED_INSTRUCTION)

    lowered = [token.lower() for token in tokens]

    if lowered[0] not in (Keyword.DEBIT.value, Keyword.CREDIT.value):
        return _reject(parsed, StatusCode.MISSING_KEYWORD)
    parsed.type = TransactionType(lowered[0].upper())

    if len(tokens) <= CURRENCY_INDEX:
        return _reject(parsed, StatusCode.MALFORMED_INSTRUCTION)

    amount_token = tokens[AMOUNT_INDEX]
    currency_token = tokens[CURRENCY_INDEX]

    # Echoed upper-cased even when the amount fails and it was never checked
    parsed.currency = currency_token.upper()

    amount = parse_amount(amount_token)
    if amount is None:
        return _reject(parsed, StatusCode.INVALID_AMOUNT)
    parsed.amount = amount

    if normalize_currency(currency_token) is None:
        return _reject(parsed, StatusCode.UNSUPPORTED_CURRENCY)

    cursor = FIRST_CLAUSE_INDEX
    for clause in _CLAUSES[parsed.type]:
        matched = match_clause(tokens, lowered, clause, cursor)
        if isinstance(matched, StatusCode):
            return _reject(parsed, matched)
        account_id, cursor = matched
        setattr(parsed, clause.target, account_id)

    on_at = find_keyword(lowered, Keyword.ON, cursor)
    if on_at != -1:
        if on_at + 1 >= len(tokens):
            return _reject(parsed, StatusCode.INVALID_DATE)
        parsed.execute_by = tokens[on_at + 1]

    return ParseResult(parsed)
