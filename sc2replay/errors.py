"""Exceptions raised while decoding replay data."""


class S2ProtocolError(Exception):
    """Base class for every decoding failure in this package."""


class MPQError(S2ProtocolError):
    """The MPQ archive could not be parsed; it may be corrupted or not a replay."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(f"MPQ Error: {detail}" if detail else "MPQ Error")


class UnsupportedProtocolVersion(S2ProtocolError):
    """The protocol version of the replay is not supported."""

    def __init__(self, version: int) -> None:
        self.version = version
        super().__init__(f"Unsupported Protocol Version: {version}")


class ByteAlignedError(S2ProtocolError):
    """A byte aligned data type could not be parsed."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Nom ByteAligned Error {detail}")


class BitPackedError(S2ProtocolError):
    """A bit packed data type could not be parsed."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Nom BitPacked Error {detail}")


class UnknownTagError(S2ProtocolError):
    """A data structure tag was not recognised."""

    def __init__(self, tag: int) -> None:
        self.tag = tag
        super().__init__(f"Unexpected Tag: {tag}")


class DuplicateTagError(S2ProtocolError):
    """A data structure tag appeared more than once."""

    def __init__(self, field: str, tag: int) -> None:
        self.field = field
        self.tag = tag
        super().__init__(f"Duplicate field {field} with tag {tag}")


class MissingFieldError(S2ProtocolError):
    """A required field was not present."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing field {field}")


class PathNotADirError(S2ProtocolError):
    """A file was expected but a directory was given."""

    def __init__(self) -> None:
        super().__init__("Expected a file, but got a directory")


class UnsupportedEventTypeError(S2ProtocolError):
    """A protocol specific event has no consolidated counterpart."""

    def __init__(self) -> None:
        super().__init__("Unsupported Event Type")