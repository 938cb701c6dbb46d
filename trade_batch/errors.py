"""Error taxonomy for batch trade construction and settlement submission."""

from __future__ import annotations


class TradeOperationError(RuntimeError):
    """Raised when a trade operation precondition fails."""


class AlreadyCommittedError(TradeOperationError):
    """Raised on append or commit once the batch is locked."""

    def __init__(self, message: str = "Operation already committed") -> None:
        super().__init__(message)


class EmptyBatchError(TradeOperationError):
    """Raised on commit when no trade legs were appended."""

    def __init__(self, message: str = "No trade legs have been added to trade") -> None:
        super().__init__(message)


class SubmissionFailure(RuntimeError):
    """Base error for settlement submitters; the settlement was not applied."""


class SubmissionOutcomeUnknownError(SubmissionFailure):
    """Settlement may or may not have been applied (e.g. broadcast without confirmation)."""
