class CivdateError(Exception):
    """Base error."""

class UnsupportedFormatError(CivdateError, ValueError):
    """Raised when a format is not one of the five supported layouts."""

class MalformedInputError(CivdateError, ValueError):
    """Raised when text does not split into three numeric parts."""

class InvalidDateError(CivdateError, ValueError):
    """Raised when components do not form a real calendar date."""

class InvalidArgumentError(CivdateError, ValueError):
    """Raised for out-of-range arguments such as month 13 in days_in_month()."""
