"""Helpers that read a bounded part of a shared event iterator.

All of them advance the iterator they are given; nothing is buffered or
replayed, so the caller continues right after whatever was consumed.
"""

from typing import Iterator, List, Optional

from dep11gen.parsing.events import EventKind, XmlEvent


def scope(events: Iterator[XmlEvent], name: str) -> Iterator[XmlEvent]:
    """Yield events up to the end tag that closes ``name``.

    Must be called right after the START of ``name`` was consumed. The
    closing END is consumed but not yielded. Nested elements with the
    same name are counted so their END does not close the scope. If the
    events run out first the scope just ends.
    """
    depth = 0
    for event in events:
        if event.is_start(name):
            depth += 1
        elif event.is_end(name):
            if depth == 0:
                return
            depth -= 1
        yield event


def next_text(events: Iterator[XmlEvent]) -> Optional[str]:
    """Return the next character data, or None if an end tag comes first.

    Whitespace-only text, comments and start tags are skipped. The END
    that stops the search is consumed.
    """
    for event in events:
        if event.kind is EventKind.TEXT:
            return event.text
        if event.kind is EventKind.END:
            return None
    return None


def drain(events: Iterator[XmlEvent]) -> None:
    for _ in events:
        pass


def collect(events: Iterator[XmlEvent], outer: str, inner: str) -> List[str]:
    """Text of every ``inner`` element inside the ``outer`` scope, in order.

    ``inner`` elements without text are skipped.
    """
    values = []
    scoped = scope(events, outer)
    for event in scoped:
        if event.is_start(inner):
            text = next_text(scoped)
            if text is not None:
                values.append(text)
    return values
