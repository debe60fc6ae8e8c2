"""Polynomials kept as lists of terms in descending exponent order."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import NamedTuple


class Term(NamedTuple):
    """One term ``coefficient * X**exponent``."""

    coefficient: int
    exponent: int


class Polynomial:
    """A polynomial whose terms are stored in the order they were appended.

    Addition expects both operands to list their terms by descending exponent.
    """

    def __init__(self, terms: Iterable[tuple[int, int]] = ()) -> None:
        self._terms: list[Term] = []
        for coefficient, exponent in terms:
            self.append(coefficient, exponent)

    def append(self, coefficient: int, exponent: int) -> None:
        """Add a term after the last one."""
        self._terms.append(Term(coefficient, exponent))

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._terms == other._terms

    def __add__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        result = Polynomial()
        left, right = self._terms, other._terms
        i = j = 0
        while i < len(left) and j < len(right):
            p, q = left[i], right[j]
            if p.exponent == q.exponent:
                total = p.coefficient + q.coefficient
                if total != 0:
                    result.append(total, p.exponent)
                i += 1
                j += 1
            elif p.exponent > q.exponent:
                result.append(*p)
                i += 1
            else:
                result.append(*q)
                j += 1
        for term in left[i:] + right[j:]:
            result.append(*term)
        return result

    def __str__(self) -> str:
        if not self._terms:
            return "Null Polynomial"
        parts = []
        for coefficient, exponent in self._terms:
            text = f"{coefficient}" if coefficient < 0 else f"+{coefficient}"
            if exponent != 0:
                text += f"X{exponent}"
            parts.append(text)
        return " ".join(parts)

    def __repr__(self) -> str:
        return f"Polynomial({[tuple(t) for t in self._terms]!r})"