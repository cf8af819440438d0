from typing import Callable, Dict, Iterable, Iterator, Optional

from dep11gen.logging import get_logger
from dep11gen.model.component import Component, IconEntry, Screenshot
from dep11gen.parsing.events import XmlEvent
from dep11gen.parsing.scope import collect, drain, next_text, scope

ICON_SUFFIX = ".png"

Rule = Callable[[Component, XmlEvent, Iterator[XmlEvent]], None]


class ComponentExtractor:
    """
    Builds a Component from one pass over an AppStream event stream.

    Every START whose local name is in the dispatch table runs exactly one
    rule. Rules may read further events from the same iterator (the text
    after a tag, or a whole sub-scope); everything else is skipped.
    """

    def __init__(self, debug: bool = False):
        """
        Args:
            debug: Log every rule that fires.
        """
        self.debug = debug
        self.logger = get_logger(self.__class__.__name__)
        self.rules: Dict[str, Rule] = {
            "component": self._component,
            "id": self._id,
            "summary": self._summary,
            "name": self._name,
            "description": self._description,
            "project_license": self._project_license,
            "developer_name": self._developer_name,
            "url": self._url,
            "screenshots": self._screenshots,
            "icon": self._icon,
            "keywords": self._keywords,
            "provides": self._provides,
            "mimetypes": self._mimetypes,
            "categories": self._categories,
        }

    def extract(self, events: Iterable[XmlEvent]) -> Component:
        component = Component()
        events = iter(events)
        for event in events:
            if not event.is_start():
                continue
            rule = self.rules.get(event.name)
            if rule is None:
                continue
            if self.debug:
                self.logger.debug(f"Applying rule for <{event.name}>")
            rule(component, event, events)
        return component

    # scalars are first-wins; a later duplicate tag is still consumed
    def _set_once(self, owner, attr: str, value: Optional[str]) -> None:
        if value is None:
            return
        if getattr(owner, attr) is not None:
            self.logger.debug(f"Ignoring repeated value for {attr}: {value!r}")
            return
        setattr(owner, attr, value)

    def _component(self, component, event, events):
        self._set_once(component, "kind", event.attributes.get("type"))

    def _id(self, component, event, events):
        self._set_once(component, "id", next_text(events))

    def _summary(self, component, event, events):
        # localized variants carry xml:lang
        if not event.attributes:
            self._set_once(component, "summary", next_text(events))

    def _name(self, component, event, events):
        if not event.attributes:
            self._set_once(component, "name", next_text(events))

    def _description(self, component, event, events):
        scoped = scope(events, "description")
        for inner in scoped:
            if inner.is_start("p") and not inner.attributes:
                text = next_text(scoped)
                if text is not None:
                    self._set_once(component, "description", text.strip())
                    break
        drain(scoped)

    def _project_license(self, component, event, events):
        self._set_once(component, "project_license", next_text(events))

    def _developer_name(self, component, event, events):
        self._set_once(component, "developer_name", next_text(events))

    def _url(self, component, event, events):
        for key in ("homepage", "bugtracker"):
            value = event.attributes.get(key, event.namespace.get(key))
            self._set_once(component.url, key, value)

    def _screenshots(self, component, event, events):
        scoped = scope(events, "screenshots")
        for inner in scoped:
            if inner.is_start("image"):
                url = next_text(scoped)
                if url is not None:
                    component.screenshots.append(Screenshot.from_url(url))

    def _icon(self, component, event, events):
        name = next_text(events)
        if name is not None:
            component.icons.append(IconEntry(name=name + ICON_SUFFIX))

    def _keywords(self, component, event, events):
        component.keywords.extend(collect(events, "keywords", "keyword"))

    def _provides(self, component, event, events):
        component.provides.binaries.extend(collect(events, "provides", "binary"))

    def _mimetypes(self, component, event, events):
        component.provides.mimetypes.extend(collect(events, "mimetypes", "mimetype"))

    def _categories(self, component, event, events):
        component.categories.extend(collect(events, "categories", "category"))
