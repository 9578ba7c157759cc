from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """The two ways reading a track can fail."""
    XML = "xml"
    PARSE = "parse"


class GPXReadError(ValueError):
    """
    Raised when a track cannot be read from a GPX file.

    Attributes:
        kind (ErrorKind): XML for malformed documents and I/O failures,
            PARSE for coordinate attributes that are not valid numbers.
        message (str): The underlying diagnostic.
        value (Optional[str]): The offending attribute value for PARSE errors.
    """
    def __init__(self, kind: ErrorKind, message: str, value: Optional[str] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.value = value

    @classmethod
    def xml(cls, cause: Exception) -> "GPXReadError":
        return cls(ErrorKind.XML, str(cause))

    @classmethod
    def parse(cls, value: str, cause: Exception) -> "GPXReadError":
        return cls(ErrorKind.PARSE, str(cause), value=value)

    def __str__(self) -> str:
        return self.message
