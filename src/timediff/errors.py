"""Exception hierarchy for timediff."""


class TimeDiffError(Exception):
    """Base exception for all timediff errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidDurationFormat(TimeDiffError, ValueError):
    """Raised when text is not a P{d}DT{h}H{m}M{s}S duration."""


class InvalidConstructorArguments(TimeDiffError, TypeError):
    """Raised when TimeDiff arguments match none of the supported shapes."""


class UnsupportedFormatError(TimeDiffError, ValueError):
    """Raised when humanize() gets an unknown format or base unit."""


class MissingResourceError(TimeDiffError, KeyError):
    """Raised when a locale or translation key is absent from the resource table."""

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message
