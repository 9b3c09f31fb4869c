"""Custom exception classes for financial aggregation.

Provides domain-specific exceptions for clear error handling and reporting.
"""


class FinanceError(Exception):
    """Base exception for financial aggregation errors."""

    pass


class SourceFetchError(FinanceError):
    """One of the source collections failed to load (network, backend, etc.)."""

    pass


class RecordValidationError(FinanceError, ValueError):
    """Source record could not be parsed (bad date, non-numeric amount, etc.)."""

    pass
