"""
HipPipe Exceptions
"""


class HipPipeError(Exception):
    """Base class for all HipPipe errors."""


class HipFileNotFoundError(HipPipeError):
    """Raised when a file list contains no Houdini project file."""

    def __init__(self, text):
        self.text = text
        super(HipFileNotFoundError, self).__init__(
            f"No houdini project found in this file list: {text!r}"
        )


class MalformedVersionError(HipPipeError, ValueError):
    """Raised when the version token of a project file name is not an integer."""

    def __init__(self, filename, token):
        self.filename = filename
        self.token = token
        super(MalformedVersionError, self).__init__(
            f"Invalid version {token!r} in project file name {filename!r}"
        )
