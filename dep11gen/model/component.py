"""DEP-11 component record and the slot handles used to complete it."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional

DEFAULT_LOCALE = "C"


@dataclass
class Url:
    homepage: Optional[str] = None
    bugtracker: Optional[str] = None


@dataclass
class IconEntry:
    """One cached icon. The parser never knows the size."""

    name: str
    width: Optional[int] = None
    height: Optional[int] = None


@dataclass
class SourceImage:
    url: Optional[str] = None
    lang: Optional[str] = None


@dataclass
class Screenshot:
    thumbnails: List[str] = field(default_factory=list)
    source_image: SourceImage = field(default_factory=SourceImage)

    @classmethod
    def from_url(cls, url: str, lang: str = DEFAULT_LOCALE) -> "Screenshot":
        return cls(thumbnails=[], source_image=SourceImage(url=url, lang=lang))


@dataclass
class Provides:
    mimetypes: List[str] = field(default_factory=list)
    binaries: List[str] = field(default_factory=list)


class SlotKind(Enum):
    """Shape of a checklist slot."""
    SCALAR = "scalar"
    LIST = "list"


class Slot:
    """Mutable handle to one field of a :class:`Component`.

    A fill callback receives a slot and can only change that field:
    ``set`` for scalar slots, ``append``/``extend`` for list slots.
    List slots convert plain strings into entries with ``factory``.
    """

    def __init__(
        self,
        label: str,
        owner: Any,
        attr: str,
        kind: SlotKind = SlotKind.SCALAR,
        factory: Optional[Callable[[str], Any]] = None,
    ):
        self.label = label
        self.kind = kind
        self._owner = owner
        self._attr = attr
        self._factory = factory

    @property
    def prompt(self) -> str:
        return f"Please provide a `{self.label}`."

    @property
    def value(self) -> Any:
        return getattr(self._owner, self._attr)

    def is_missing(self) -> bool:
        value = self.value
        if self.kind is SlotKind.LIST:
            return not value
        return value is None

    def set(self, value: str) -> None:
        if self.kind is not SlotKind.SCALAR:
            raise TypeError(f"`{self.label}` is a list slot, use append()")
        setattr(self._owner, self._attr, value)

    def append(self, value: str) -> None:
        if self.kind is not SlotKind.LIST:
            raise TypeError(f"`{self.label}` is a scalar slot, use set()")
        item = self._factory(value) if self._factory else value
        getattr(self._owner, self._attr).append(item)

    def extend(self, values: Iterable[str]) -> None:
        for value in values:
            self.append(value)

    def __repr__(self) -> str:
        return f"Slot({self.label!r}, kind={self.kind.value}, missing={self.is_missing()})"


# validator scan order, also the order users get prompted in
CHECKLIST = (
    "Type",
    "Id",
    "Package",
    "Summary",
    "Description",
    "DeveloperName",
    "Categories",
    "Keywords",
    "Url.homepage",
    "Icon",
    "Screenshots",
    "Provides.mimetypes",
    "Provides.binaries",
)


@dataclass
class Component:
    """
    Everything one parse pass extracts from an AppStream document.

    Scalars start as ``None`` and lists start empty. The extractor fills
    scalars first-wins and only ever appends to lists, in document order.
    """

    kind: Optional[str] = None
    id: Optional[str] = None
    package: Optional[str] = None
    name: Optional[str] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    developer_name: Optional[str] = None
    project_license: Optional[str] = None
    categories: List[str] = field(default_factory=list)
    keywords: List[str] = field(default_factory=list)
    url: Url = field(default_factory=Url)
    icons: List[IconEntry] = field(default_factory=list)
    screenshots: List[Screenshot] = field(default_factory=list)
    provides: Provides = field(default_factory=Provides)

    def checklist(self) -> List[Slot]:
        """Slots for every mandatory field, in CHECKLIST order."""
        return [
            Slot("Type", self, "kind"),
            Slot("Id", self, "id"),
            Slot("Package", self, "package"),
            Slot("Summary", self, "summary"),
            Slot("Description", self, "description"),
            Slot("DeveloperName", self, "developer_name"),
            Slot("Categories", self, "categories", SlotKind.LIST),
            Slot("Keywords", self, "keywords", SlotKind.LIST),
            Slot("Url.homepage", self.url, "homepage"),
            Slot("Icon", self, "icons", SlotKind.LIST, factory=IconEntry),
            Slot("Screenshots", self, "screenshots", SlotKind.LIST, factory=Screenshot.from_url),
            Slot("Provides.mimetypes", self.provides, "mimetypes", SlotKind.LIST),
            Slot("Provides.binaries", self.provides, "binaries", SlotKind.LIST),
        ]

    def slot(self, label: str) -> Slot:
        for slot in self.checklist():
            if slot.label == label:
                return slot
        raise KeyError(f"Unknown checklist entry: {label}")

    def missing(self) -> List[str]:
        """Labels of the checklist entries that still need a value."""
        return [slot.label for slot in self.checklist() if slot.is_missing()]

    def is_complete(self) -> bool:
        return not self.missing()
