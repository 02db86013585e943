"""
Boolean retrieval over posting lists.

- and_postings keeps the entries of the first list whose doc_id also appears
  in the second (duplicates and order of the first list are kept).
- or_postings is the deduplicated union, returned in ascending doc_id order.
- evaluate_mixed runs a two-stack evaluation of "term (AND|OR term)*"
  sequences where AND binds tighter than OR.

None of these functions modify their inputs; every result is a new list.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Sequence

AND = "AND"
OR = "OR"
OPERATORS = frozenset({AND, OR})


def and_postings(first: Sequence[int], second: Sequence[int]) -> List[int]:
    """Intersect two posting lists (retain-all semantics on a copy of first)."""
    members = set(second)
    return [doc_id for doc_id in first if doc_id in members]


def or_postings(first: Sequence[int], second: Sequence[int]) -> List[int]:
    """Union of two posting lists, one entry per doc_id."""
    return sorted(set(first) | set(second))


def apply_operator(operator: str, first: Sequence[int], second: Sequence[int]) -> List[int]:
    if operator == AND:
        return and_postings(first, second)
    if operator == OR:
        return or_postings(first, second)
    raise ValueError(f"Unknown boolean operator: {operator!r}")


def _reduce(operands: List[List[int]], operators: List[str]) -> None:
    # A missing operand (dangling operator) counts as an empty posting list.
    operator = operators.pop()
    first = operands.pop() if operands else []
    second = operands.pop() if operands else []
    operands.append(apply_operator(operator, first, second))


def evaluate_mixed(
    tokens: Iterable[str],
    lookup: Callable[[str], List[int]],
) -> List[int]:
    """
    Evaluate a token sequence of terms and the literal operators "AND"/"OR".

    Operands go on one stack, operators on another. An incoming OR first
    reduces any AND sitting on top of the operator stack; no other pair
    triggers an early reduction. Remaining operators are then applied in
    stack (last-in, first-out) order. Each reduction pops the most recent
    operand first, so "x AND y" keeps the duplicates of y's postings.

    lookup must return a fresh list for each term (empty if unindexed).
    """
    operands: List[List[int]] = []
    operators: List[str] = []

    for token in tokens:
        if token in OPERATORS:
            while operators and operators[-1] == AND and token == OR:
                _reduce(operands, operators)
            operators.append(token)
        else:
            operands.append(lookup(token))

    while operators:
        _reduce(operands, operators)

    return operands[-1] if operands else []
