"""Custom exceptions for the scout-file parsing engine.

All exceptions inherit from :class:`ScoutLogError` so callers can catch
the full family with a single ``except ScoutLogError`` clause.

Data-quality problems inside an already decoded payload are never
raised; they are defaulted in place.
"""


class ScoutLogError(Exception):
    """Base exception for all scout-log engine errors."""


class DecodeError(ScoutLogError):
    """Raised when a payload cannot be decoded into JSON or an XML tree."""


class ScoutFileError(ScoutLogError):
    """Raised when a scout file cannot be read or has an unsupported type."""
