from __future__ import annotations


class OracleError(Exception):
    """Base class for every error raised by this package."""


class OracleConfigurationError(OracleError, ValueError):
    """Raised while assembling a configuration; no oracle instance is created."""


class OracleDefinitionError(OracleError, ValueError):
    """Raised for invalid oracle definition files."""


class OracleQueryError(OracleError, RuntimeError):
    """Raised by a single price query."""


class FeedReadError(OracleQueryError):
    def __init__(self, message: str, *, source: str | None = None, address: str | None = None) -> None:
        super().__init__(message)
        self.source = source
        self.address = address


class NegativeAnswerError(FeedReadError):
    def __init__(self, answer: int, *, source: str | None = None, address: str | None = None) -> None:
        super().__init__(f"feed returned a negative answer: {answer}", source=source, address=address)
        self.answer = answer


class ConverterReadError(OracleQueryError):
    def __init__(self, message: str, *, source: str | None = None, address: str | None = None) -> None:
        super().__init__(message)
        self.source = source
        self.address = address


class ZeroDenominatorError(OracleQueryError, ZeroDivisionError):
    """Quote side evaluated to zero."""


class PriceOverflowError(OracleQueryError, OverflowError):
    """An intermediate product or the final price does not fit in uint256."""


class FeedDecimalsMismatchError(OracleQueryError):
    def __init__(self, mismatches: dict[str, tuple[int, int]]) -> None:
        details = ", ".join(
            f"{slot}: configured={configured} live={live}" for slot, (configured, live) in sorted(mismatches.items())
        )
        super().__init__(f"feed decimals changed since assembly ({details})")
        self.mismatches = mismatches


__all__ = [
    "ConverterReadError",
    "FeedDecimalsMismatchError",
    "FeedReadError",
    "NegativeAnswerError",
    "OracleConfigurationError",
    "OracleDefinitionError",
    "OracleError",
    "OracleQueryError",
    "PriceOverflowError",
    "ZeroDenominatorError",
]
