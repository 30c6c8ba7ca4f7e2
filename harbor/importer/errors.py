"""Errors raised while importing the legacy prototype."""


class LegacyImportError(Exception):
    """Base class for fatal import errors raised before any writes."""


class MissingSourceError(LegacyImportError):
    """The prototype document does not exist."""


class ExtractionError(LegacyImportError):
    """The seed assignment statement could not be located in the document."""


class ParseError(LegacyImportError):
    """The located seed literal is not valid relaxed JSON or has the wrong shape."""
