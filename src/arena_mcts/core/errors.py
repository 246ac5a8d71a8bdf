"""Errors raised by the search core."""


class ContractViolation(AssertionError):
    """A broken invariant or a misbehaving game implementation.

    Never recovered from: the search is in-memory and deterministic, so these
    only signal programming errors.
    """
