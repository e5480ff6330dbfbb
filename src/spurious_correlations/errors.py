"""Error taxonomy.

``PairError`` subclasses are scoped to one pair: the flow catches them and
records a failed result for that pair only. Everything else propagates.
"""

from __future__ import annotations


class CorrelationError(Exception):
    """Base class for all package errors."""


class PairError(CorrelationError):
    """An error that invalidates a single pair but not the batch."""


class FetchError(PairError):
    """An upstream provider call did not succeed."""

    def __init__(
        self,
        provider: str,
        status: int | None = None,
        message: str | None = None,
    ) -> None:
        self.provider = provider
        self.status = status
        self.message = message
        detail = message or (f"HTTP {status}" if status is not None else "request failed")
        if status is not None and message:
            detail = f"HTTP {status}: {message}"
        super().__init__(f"{provider}: {detail}")


#: Name used by adapter docs; same class.
ProviderError = FetchError


class InsufficientOverlapError(PairError):
    """Two series share too few time keys to be compared."""

    def __init__(self, found: int, required: int = 3) -> None:
        self.found = found
        self.required = required
        super().__init__(
            f"Insufficient overlapping data ({found} common points, need {required})"
        )


class UnknownProviderError(CorrelationError):
    """A specification references a provider with no adapter."""

    def __init__(self, provider: object) -> None:
        self.provider = provider
        super().__init__(f"Unknown provider: {provider}")


class PairGenerationError(CorrelationError):
    """The pool cannot yield the requested number of unique pairs."""
