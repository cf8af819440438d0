"""dep11gen - turn AppStream XML into DEP-11 YAML component metadata."""

__version__ = "0.1.0"

from dep11gen.errors import (
    Dep11Error,
    InputReadError,
    MalformedXmlError,
    SerializationError,
    UnfilledSlotError,
    ValidatorStuckError,
)
from dep11gen.model.component import Component
from dep11gen.parsing.reader import parse_file, parse_stream, parse_string
from dep11gen.render import load, render
from dep11gen.validation import CompletenessValidator

__all__ = [
    "Component",
    "CompletenessValidator",
    "Dep11Error",
    "InputReadError",
    "MalformedXmlError",
    "SerializationError",
    "UnfilledSlotError",
    "ValidatorStuckError",
    "load",
    "parse_file",
    "parse_stream",
    "parse_string",
    "render",
]
