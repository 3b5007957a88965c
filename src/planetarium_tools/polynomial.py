"""Polynomials with real coefficients, evaluated in Horner form."""

from __future__ import annotations

from typing import Any

from planetarium_tools.interval import check_argument


class Polynomial:
    """Polynomial c_n x^n + ... + c_1 x + c_0 with coefficients stored highest degree first."""

    __slots__ = ('_coefficients',)

    def __init__(self, coefficients: tuple[float, ...]) -> None:
        check_argument(len(coefficients) > 0, 'polynomial needs at least one coefficient')
        check_argument(
            len(coefficients) == 1 or coefficients[0] != 0,
            f'leading coefficient must be non-zero, got {coefficients[0]!r}',
        )
        self._coefficients = tuple(float(c) for c in coefficients)

    @classmethod
    def of(cls, coefficient_n: float, *coefficients: float) -> Polynomial:
        """Build c_n x^n + ... + c_0 from (c_n, c_{n-1}, ..., c_0).

        Parameters:
            coefficient_n: Leading coefficient; non-zero unless it is the only one.
            coefficients: Remaining coefficients in decreasing degree.

        Raises:
            ValueError: If the leading coefficient of a non-constant polynomial is 0.
        """
        return cls((coefficient_n, *coefficients))

    @property
    def coefficients(self) -> tuple[float, ...]:
        return self._coefficients

    @property
    def degree(self) -> int:
        return len(self._coefficients) - 1

    def at(self, x: Any) -> Any:
        """Value of the polynomial at x (float or numpy array), by Horner's method."""
        value = self._coefficients[0]
        for c in self._coefficients[1:]:
            value = value * x + c
        return value

    def __eq__(self, other: object) -> bool:
        raise TypeError('Polynomial does not support equality')

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f'Polynomial.of({", ".join(repr(c) for c in self._coefficients)})'

    def __str__(self) -> str:
        terms: list[str] = []
        for i, c in enumerate(self._coefficients):
            power = self.degree - i
            if c == 0 and self.degree > 0:
                continue
            magnitude = abs(c)
            if power == 0 or magnitude != 1:
                body = f'{magnitude:g}'
            else:
                body = ''
            if power == 1:
                body += 'x'
            elif power > 1:
                body += f'x^{power}'
            if not terms:
                terms.append(f'-{body}' if c < 0 else body)
            else:
                terms.append(f'- {body}' if c < 0 else f'+ {body}')
        return ' '.join(terms)
