"""Sparse polynomials stored as terms in descending order of exponent."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Term:
    """One term, coeff * x^exp."""

    coeff: int
    exp: int

    def __str__(self) -> str:
        return f"{self.coeff}*x^{self.exp}"


@dataclass(frozen=True)
class Polynomial:
    """A polynomial whose terms are kept in descending order of exponent."""

    terms: tuple[Term, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "terms", tuple(self.terms))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[int, int]]) -> Polynomial:
        """Build from (coefficient, exponent) pairs."""
        return cls(tuple(Term(coeff, exp) for coeff, exp in pairs))

    def __len__(self) -> int:
        return len(self.terms)

    def __iter__(self) -> Iterator[Term]:
        return iter(self.terms)

    def __add__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        mine, theirs = self.terms, other.terms
        merged: list[Term] = []
        i = j = 0
        while i < len(mine) and j < len(theirs):
            a, b = mine[i], theirs[j]
            if a.exp > b.exp:
                merged.append(a)
                i += 1
            elif a.exp < b.exp:
                merged.append(b)
                j += 1
            else:
                merged.append(Term(a.coeff + b.coeff, a.exp))
                i += 1
                j += 1
        merged.extend(mine[i:])
        merged.extend(theirs[j:])
        return Polynomial(tuple(merged))

    def __str__(self) -> str:
        return " + ".join(str(term) for term in self.terms)