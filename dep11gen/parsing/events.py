"""Forward-only XML event source.

The document is fed to the SAX incremental parser one chunk at a time and
the events collected for that chunk are yielded before the next read, so
callers see a single pass over the input and never the whole tree.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, IO, Iterator, List, Optional
from xml.sax import SAXParseException, handler, make_parser

from dep11gen.errors import MalformedXmlError

CHUNK_SIZE = 64 * 1024


class EventKind(Enum):
    START = "start"
    END = "end"
    TEXT = "text"
    WHITESPACE = "whitespace"
    COMMENT = "comment"


@dataclass(frozen=True)
class XmlEvent:
    kind: EventKind
    name: Optional[str] = None
    attributes: Dict[str, str] = field(default_factory=dict)
    namespace: Dict[str, str] = field(default_factory=dict)
    text: Optional[str] = None

    @classmethod
    def start(cls, name: str, attributes: Optional[Dict[str, str]] = None,
              namespace: Optional[Dict[str, str]] = None) -> "XmlEvent":
        return cls(EventKind.START, name=name, attributes=attributes or {}, namespace=namespace or {})

    @classmethod
    def end(cls, name: str) -> "XmlEvent":
        return cls(EventKind.END, name=name)

    @classmethod
    def characters(cls, text: str) -> "XmlEvent":
        """TEXT event, or WHITESPACE when ``text`` holds nothing else."""
        kind = EventKind.TEXT if text.strip() else EventKind.WHITESPACE
        return cls(kind, text=text)

    @classmethod
    def comment(cls, text: str) -> "XmlEvent":
        return cls(EventKind.COMMENT, text=text)

    def is_start(self, name: Optional[str] = None) -> bool:
        return self.kind is EventKind.START and (name is None or self.name == name)

    def is_end(self, name: Optional[str] = None) -> bool:
        return self.kind is EventKind.END and (name is None or self.name == name)


class _EventCollector(handler.ContentHandler, handler.LexicalHandler):
    """Turns SAX callbacks into XmlEvents.

    Adjacent character callbacks are joined into one event. Namespace
    bindings are tracked per element so every START carries the prefixes
    in scope at that point (the default namespace is keyed by "").
    """

    def __init__(self):
        super().__init__()
        self.events: List[XmlEvent] = []
        self._text: List[str] = []
        self._bindings: List[Dict[str, str]] = [{}]
        self._pending: Dict[str, str] = {}

    def drain(self) -> List[XmlEvent]:
        events, self.events = self.events, []
        return events

    def _flush_text(self) -> None:
        if self._text:
            self.events.append(XmlEvent.characters("".join(self._text)))
            self._text = []

    def startPrefixMapping(self, prefix, uri):
        self._pending[prefix or ""] = uri

    def startElementNS(self, name, qname, attrs):
        self._flush_text()
        bindings = dict(self._bindings[-1])
        bindings.update(self._pending)
        self._pending = {}
        self._bindings.append(bindings)

        attributes = {local: value for (_, local), value in attrs.items()}
        self.events.append(XmlEvent.start(name[1], attributes, bindings))

    def endElementNS(self, name, qname):
        self._flush_text()
        self._bindings.pop()
        self.events.append(XmlEvent.end(name[1]))

    def characters(self, content):
        self._text.append(content)

    def ignorableWhitespace(self, whitespace):
        self._text.append(whitespace)

    def processingInstruction(self, target, data):
        self._flush_text()

    def comment(self, content):
        self._flush_text()
        self.events.append(XmlEvent.comment(content))

    def endDocument(self):
        self._flush_text()


def _make_parser(collector: _EventCollector):
    parser = make_parser()
    parser.setFeature(handler.feature_namespaces, True)
    parser.setFeature(handler.feature_external_ges, False)
    parser.setContentHandler(collector)
    parser.setProperty(handler.property_lexical_handler, collector)
    return parser


def iter_events(stream: IO, chunk_size: int = CHUNK_SIZE) -> Iterator[XmlEvent]:
    """Yield the events of the XML document read from ``stream``.

    ``stream`` may be binary or text. Any syntax error, including a
    truncated document, raises MalformedXmlError from the point where the
    tokenizer notices it.
    """
    collector = _EventCollector()
    parser = _make_parser(collector)
    try:
        while True:
            chunk = stream.read(chunk_size)
            # an empty feed still starts the document, so empty input fails on close
            parser.feed(chunk)
            yield from collector.drain()
            if not chunk:
                break
        parser.close()
    except SAXParseException as e:
        raise MalformedXmlError(e.getMessage(), e.getLineNumber(), e.getColumnNumber()) from e
    yield from collector.drain()
