"""Time units and conversion from raw nanosecond intervals."""

from datetime import timedelta
from enum import IntEnum

from perf_lite.errors import ContractViolation


class TimeUnit(IntEnum):
    """Output time unit for benchmark statistics."""

    NANOSECONDS = 0
    MICROSECONDS = 1
    MILLISECONDS = 2
    SECONDS = 3


_NS_PER_UNIT: dict[TimeUnit, float] = {
    TimeUnit.NANOSECONDS: 1.0,
    TimeUnit.MICROSECONDS: 1_000.0,
    TimeUnit.MILLISECONDS: 1_000_000.0,
    TimeUnit.SECONDS: 1_000_000_000.0,
}

_LABELS: dict[TimeUnit, str] = {
    TimeUnit.NANOSECONDS: "ns",
    TimeUnit.MICROSECONDS: "µs",
    TimeUnit.MILLISECONDS: "ms",
    TimeUnit.SECONDS: "s",
}

# Finer units get more decimal places.
_PRECISION: dict[TimeUnit, int] = {
    TimeUnit.NANOSECONDS: 2,
    TimeUnit.MICROSECONDS: 3,
    TimeUnit.MILLISECONDS: 4,
    TimeUnit.SECONDS: 6,
}


def _lookup(table: dict, unit: TimeUnit):
    try:
        return table[unit]
    except (KeyError, TypeError):
        raise ContractViolation(f"Invalid time unit; got {unit!r}") from None


def ns_per_unit(unit: TimeUnit) -> float:
    """Number of nanoseconds in one ``unit``."""
    return _lookup(_NS_PER_UNIT, unit)


def to_unit(interval: float | timedelta, unit: TimeUnit) -> float:
    """
    Convert a raw interval into the given time unit.

    Parameters
    ----------
    interval : float or timedelta
        The interval in nanoseconds (fractional values are kept), or a
        ``timedelta``.

    unit : TimeUnit
        The unit to express the interval in.

    Returns
    -------
    float
        The interval expressed in ``unit``, without truncation.

    Example
    -------
    >>> to_unit(1500.0, TimeUnit.MICROSECONDS)
    1.5
    """
    factor = ns_per_unit(unit)
    if isinstance(interval, timedelta):
        # Integer arithmetic avoids float drift in total_seconds().
        interval = (
            (interval.days * 86_400 + interval.seconds) * 1_000_000
            + interval.microseconds
        ) * 1_000
    return float(interval) / factor


def unit_label(unit: TimeUnit) -> str:
    """Short display label for ``unit`` (eg 'µs')."""
    return _lookup(_LABELS, unit)


def unit_precision(unit: TimeUnit) -> int:
    """Number of decimal places used when displaying values in ``unit``."""
    return _lookup(_PRECISION, unit)


def parse_unit(text: str) -> TimeUnit:
    """Parse a unit from its label ('us', 'µs', 'ms', ...) or member name."""
    normalized = text.strip().lower()
    if normalized == "us":
        normalized = "µs"
    for unit, label in _LABELS.items():
        if normalized in (label, unit.name.lower()):
            return unit
    raise ValueError(
        f"Invalid time unit; expected one of {sorted(_LABELS.values())} but got {text!r}"
    )
