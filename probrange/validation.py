"""Legality checks for proportions and probabilities.

Probabilities are compared in exact decimal arithmetic. Floats are
converted through their shortest string representation, so 0.1 becomes
Decimal("0.1") rather than its binary expansion, and [0.1, 0.2, 0.3, 0.4]
sums to exactly 1.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import Decimal, InvalidOperation

from probrange.errors import InvalidConfigError

Number = int | float | str | Decimal

ONE = Decimal(1)
ZERO = Decimal(0)


def to_decimal(value: Number, field: str | None = None) -> Decimal:
    """Convert a number to an exact Decimal.

    Parameters
    ----------
    value : int | float | str | Decimal
        Number to convert.
    field : str | None
        Setting name reported in the error message.

    Returns
    -------
    Decimal
        Finite decimal value.

    Raises
    ------
    InvalidConfigError
        If the value is not a finite number.

    Examples
    --------
    >>> to_decimal(0.01)
    Decimal('0.01')
    >>> to_decimal(3)
    Decimal('3')
    """
    if isinstance(value, bool):
        raise InvalidConfigError(f"{value!r} is not a number", field=field)
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except InvalidOperation as e:
            raise InvalidConfigError(f"{value!r} is not a number", field=field) from e
    if not result.is_finite():
        raise InvalidConfigError(f"{value!r} is not a finite number", field=field)
    return result


def to_decimals(
    values: Iterable[Number] | None, field: str | None = None
) -> tuple[Decimal, ...]:
    """Convert a sequence of numbers to a tuple of Decimals (None -> empty)."""
    if values is None:
        return ()
    return tuple(to_decimal(value, field=field) for value in values)


def check_range_setting_legal(
    proportions: Sequence[Decimal], probabilities: Sequence[Decimal]
) -> bool:
    """Check that the probabilities count matches the proportions count.

    Both sequences empty is legal (fully uniform mode). Otherwise there must
    be exactly one more probability than proportions, since n boundaries
    split the interval into n + 1 sub-ranges.

    Parameters
    ----------
    proportions : Sequence[Decimal]
        Configured proportions.
    probabilities : Sequence[Decimal]
        Configured probabilities.

    Returns
    -------
    bool
        Always True.

    Raises
    ------
    InvalidConfigError
        If len(probabilities) - len(proportions) != 1.
    """
    if not proportions and not probabilities:
        return True

    if len(probabilities) - len(proportions) != 1:
        raise InvalidConfigError(
            "probabilities count must equal proportions count + 1",
            field="probabilities",
        )
    return True


def check_probabilities_setting_legal(probabilities: Sequence[Decimal]) -> bool:
    """Check that every probability lies in [0, 1] and they sum to exactly 1.

    Zero is accepted: a zero-probability sub-range is legal and is never
    selected by a draw.

    Parameters
    ----------
    probabilities : Sequence[Decimal]
        Configured probabilities. Empty is trivially legal.

    Returns
    -------
    bool
        Always True.

    Raises
    ------
    InvalidConfigError
        If a probability is outside [0, 1] or the sum differs from 1.

    Examples
    --------
    >>> check_probabilities_setting_legal(to_decimals([0.1, 0.2, 0.3, 0.4]))
    True
    """
    if not probabilities:
        return True

    for probability in probabilities:
        if probability < ZERO or probability > ONE:
            raise InvalidConfigError(
                "probabilities must be between 0 and 1", field="probabilities"
            )

    if sum(probabilities, ZERO) != ONE:
        raise InvalidConfigError("probabilities must sum to 1", field="probabilities")
    return True
