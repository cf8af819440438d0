"""Exceptions raised by dep11gen.

Everything derives from :class:`Dep11Error` so callers at a boundary (the
CLI, the batch steps) can catch one type. A missing mandatory field is not
an error; it is handed to the completeness validator instead.
"""

from pathlib import Path
from typing import Optional, Union


class Dep11Error(Exception):
    """Base class for all dep11gen failures."""


class InputReadError(Dep11Error):
    """The input document could not be opened or read."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot read {self.path}: {reason}")


class MalformedXmlError(Dep11Error):
    """The XML tokenizer rejected the document."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.message = message
        self.line = line
        self.column = column
        location = f" (line {line}, column {column})" if line is not None else ""
        super().__init__(f"Malformed XML{location}: {message}")


class SerializationError(Dep11Error):
    """Rendering a component to YAML, or loading one back, failed."""


class ConfigError(Dep11Error):
    """The pipeline configuration is missing or invalid."""


class UnfilledSlotError(Dep11Error):
    """A fill callback returned without filling the slot it was given."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Fill callback returned without providing `{label}`")


class ValidatorStuckError(Dep11Error):
    """The completeness validator hit its prompt limit."""

    def __init__(self, limit: int, label: str):
        self.limit = limit
        self.label = label
        super().__init__(f"Gave up after {limit} prompts; `{label}` is still missing")
