"""
Errors raised while reading, decoding and writing Swagger files.
"""


class SwaggerEditorError(Exception):
    """Base class for errors reported back to the interactive prompt"""


class FileError(SwaggerEditorError):
    """A file could not be read or written"""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class DecodeError(SwaggerEditorError):
    """File or payload content is not well-formed YAML/JSON"""
