"""Contract violations raised for programmer errors."""


class ContractViolation(AssertionError):
    """Raised when a caller breaks a precondition of the benchmarking API.

    These represent misuse (zero iterations, unknown time unit, etc), not
    runtime conditions, and are not meant to be caught and recovered from.
    """


def require(condition: bool, message: str) -> None:
    """Raise ContractViolation with ``message`` unless ``condition`` holds.

    Unlike a bare ``assert``, this check survives ``python -O``.
    """
    if not condition:
        raise ContractViolation(message)
