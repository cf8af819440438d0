"""Entry points that turn an AppStream document into a Component."""

import io
from pathlib import Path
from typing import IO, Optional, Union

from dep11gen.errors import InputReadError
from dep11gen.logging import get_logger
from dep11gen.model.component import Component
from dep11gen.parsing.events import CHUNK_SIZE, iter_events
from dep11gen.parsing.extractor import ComponentExtractor

logger = get_logger("reader")


def parse_stream(stream: IO, extractor: Optional[ComponentExtractor] = None,
                 chunk_size: int = CHUNK_SIZE) -> Component:
    """Parse an open binary or text stream.

    Raises:
        MalformedXmlError: The document is not well-formed XML.
    """
    extractor = extractor or ComponentExtractor()
    return extractor.extract(iter_events(stream, chunk_size))


def parse_string(text: Union[str, bytes], extractor: Optional[ComponentExtractor] = None) -> Component:
    stream = io.BytesIO(text) if isinstance(text, bytes) else io.StringIO(text)
    return parse_stream(stream, extractor)


def parse_file(path: Union[str, Path], extractor: Optional[ComponentExtractor] = None) -> Component:
    """Parse the AppStream file at ``path``.

    Raises:
        InputReadError: The file cannot be opened or read.
        MalformedXmlError: The document is not well-formed XML.
    """
    path = Path(path)
    try:
        with open(path, "rb") as stream:
            component = parse_stream(stream, extractor)
    except OSError as e:
        raise InputReadError(path, e.strerror or str(e)) from e

    logger.debug(f"Parsed {path.name}: missing {component.missing()}")
    return component
