"""Exceptions raised while reading NBT data or mapping it onto other types."""

MAX_DEPTH = 512


class _FixedMessage(Exception):
    """Exception whose message defaults to the class's ``message`` attribute."""

    message = ""

    def __init__(self, *args):
        super().__init__(*(args or (self.message,)))


class NbtError(Exception):
    """Base class for every error met while reading NBT."""


class InvalidRootTypeError(NbtError):
    """The root tag was neither a compound nor an end tag."""

    def __init__(self, tag_id):
        self.tag_id = tag_id
        super().__init__(f"Invalid root type {tag_id}")


class UnknownTagIdError(NbtError):
    """A tag id outside the range the format defines was found."""

    def __init__(self, tag_id):
        self.tag_id = tag_id
        super().__init__(f"Unknown tag id {tag_id}")


class UnexpectedEofError(NbtError, _FixedMessage):
    """The data ended in the middle of a tag."""

    message = "Unexpected end of data"


class MaxDepthExceededError(NbtError, _FixedMessage):
    """The data nests compounds or lists deeper than ``MAX_DEPTH``."""

    message = f"Tried to read NBT tag with too high complexity, depth > {MAX_DEPTH}"


class DeserializeError(Exception):
    """Base class for errors met while turning NBT into other types."""


class MissingFieldError(DeserializeError, _FixedMessage):
    """A required field was not present."""

    message = "Missing field"


class MismatchedFieldTypeError(DeserializeError):
    """A field was present but held a tag of the wrong type."""

    def __init__(self, field):
        self.field = field
        super().__init__(f"Mismatched type for {field}")


class UnknownFieldError(DeserializeError):
    """A field that the target type does not know was present."""

    def __init__(self, field):
        self.field = field
        super().__init__(f'Unknown field "{field}"')