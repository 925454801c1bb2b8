"""Exceptions raised by the optimizers."""


class ConfigurationError(ValueError):
    """An optimizer was configured in a way that makes a run impossible.

    Raised by `optimize()` before the iterate is touched, so the caller's coordinates are left as they were.
    """
