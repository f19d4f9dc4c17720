"""Polynomials kept as ordered term lists, with term-wise addition."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Term:
    """One term ``coef * x ** expo``."""

    coef: float
    expo: int


class Polynomial:
    """A polynomial whose terms are kept in the order they were appended.

    Addition expects both operands to list their terms by decreasing exponent.
    """

    def __init__(self, terms: Iterable[tuple[float, int]] = ()) -> None:
        self._terms: list[Term] = []
        for coef, expo in terms:
            self.append_term(coef, expo)

    def append_term(self, coef: float, expo: int) -> Term:
        """Add a term after the current last term."""
        term = Term(float(coef), int(expo))
        self._terms.append(term)
        return term

    def __add__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return add_poly(self, other)

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __str__(self) -> str:
        return " +".join(f"{term.coef:3.0f}x^{term.expo}" for term in self._terms)


def add_poly(a: Polynomial, b: Polynomial) -> Polynomial:
    """Merge two polynomials, adding coefficients of equal exponents.

    Terms with equal exponents are summed even when the sum is zero.
    """
    result = Polynomial()
    terms_a, terms_b = iter(a), iter(b)
    ta, tb = next(terms_a, None), next(terms_b, None)
    while ta is not None and tb is not None:
        if ta.expo == tb.expo:
            result.append_term(ta.coef + tb.coef, ta.expo)
            ta, tb = next(terms_a, None), next(terms_b, None)
        elif ta.expo > tb.expo:
            result.append_term(ta.coef, ta.expo)
            ta = next(terms_a, None)
        else:
            result.append_term(tb.coef, tb.expo)
            tb = next(terms_b, None)
    for term, rest in ((ta, terms_a), (tb, terms_b)):
        if term is not None:
            result.append_term(term.coef, term.expo)
            for remaining in rest:
                result.append_term(remaining.coef, remaining.expo)
    return result