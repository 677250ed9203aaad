"""Optimization barrier for benchmarked values.

CPython never elides a call whose result is unused, but tracing JITs
(PyPy) may drop work whose result is never observed. Storing every value
into a module-level slot is the Python analogue of a volatile store: the
value stays reachable until the next barrier call, so the computation that
produced it must happen.

This is best effort. It holds on CPython; on a JIT it holds as long as the
runtime does not prove the sink itself is never read.
"""

from typing import Any

_sink: list[Any] = [None]


def do_not_optimize(value: Any) -> None:
    """
    Consume ``value`` so the computation producing it is retained.

    Works for ``None`` results (void workloads) as well, where the store
    acts as the sequencing point after the call has completed.

    Parameters
    ----------
    value : Any
        The result of (or an object mutated by) the benchmarked work.
    """
    _sink[0] = value


def sink_value() -> Any:
    """Return the last value passed through the barrier."""
    return _sink[0]


def clobber() -> None:
    """Release the reference held by the barrier sink."""
    _sink[0] = None
