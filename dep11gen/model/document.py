"""Unit of work passed between pipeline steps."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from dep11gen.model.component import Component


@dataclass
class Document:
    """
    One input file on its way through the pipeline.

    ``component`` is set by the extraction step, ``content`` holds the
    rendered YAML once the export step has run.
    """

    file_path: Path
    file_format: str
    component: Optional[Component] = None
    content: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __hash__(self):
        return hash(self.file_path)

    def __eq__(self, other):
        return isinstance(other, Document) and self.file_path == other.file_path

    @property
    def filename(self) -> str:
        """Get the filename without path."""
        return self.file_path.name

    @property
    def stem(self) -> str:
        return self.file_path.stem

    @property
    def is_parsed(self) -> bool:
        return self.component is not None

    def add_metadata(self, key: str, value: Any) -> None:
        """Add a metadata entry."""
        self.metadata[key] = value

    def get_metadata(self, key: str, default: Any = None) -> Any:
        """Get a metadata value with optional default."""
        return self.metadata.get(key, default)

    def __str__(self) -> str:
        return f"Document({self.filename}, {self.file_format} format)"

    def __repr__(self) -> str:
        return f"Document(file_path={self.file_path}, format={self.file_format}, parsed={self.is_parsed})"
