class CalcoptError(Exception):
    """Base error."""

class InvalidFieldError(CalcoptError):
    """Raised when a field cannot be used for the requested operation."""

class UnsupportedFieldError(InvalidFieldError):
    """Raised when a field is never supported by a date (e.g. time-of-day fields)."""

class UnsupportedUnitError(UnsupportedFieldError):
    """Raised when a unit cannot be added to or measured between dates."""

class InvalidValueError(CalcoptError, ValueError):
    """Raised when a field value lies outside its valid range."""

class InvalidEraError(InvalidValueError):
    """Raised when an era tag is not one of the Coptic eras."""

class ArithmeticOverflowError(CalcoptError, OverflowError):
    """Raised when date arithmetic leaves the signed 64-bit range."""

class UnsupportedCombinationError(CalcoptError, TypeError):
    """Raised when a period is requested between incompatible temporals."""
