"""Exceptions raised by notes2md."""


class Notes2MdError(Exception):
    """Base exception for notes2md."""

    pass


class DecodeError(Notes2MdError):
    """Raised when a source export is structurally invalid."""

    pass


class InvalidFilenameError(Notes2MdError):
    """Raised when a note title cannot be turned into a filename."""

    pass
