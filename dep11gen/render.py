"""DEP-11 YAML rendering of a Component, and the reverse."""

from typing import Any, Dict, Optional

import yaml

from dep11gen.errors import SerializationError
from dep11gen.model.component import (
    DEFAULT_LOCALE,
    Component,
    IconEntry,
    Provides,
    Screenshot,
    SourceImage,
    Url,
)


def _localized(value: Optional[str]) -> Dict[str, Optional[str]]:
    return {DEFAULT_LOCALE: value}


def to_dict(component: Component) -> Dict[str, Any]:
    """Plain-data DEP-11 layout, keys in document order."""
    return {
        "Type": component.kind,
        "ID": component.id,
        "Package": component.package,
        "Name": _localized(component.name),
        "Summary": _localized(component.summary),
        "Description": _localized(component.description),
        "DeveloperName": _localized(component.developer_name),
        "ProjectLicense": component.project_license,
        "Categories": list(component.categories),
        "Keywords": list(component.keywords),
        "Url": {
            "homepage": component.url.homepage,
            "bugtracker": component.url.bugtracker,
        },
        "Icon": {
            "cached": [
                {"name": icon.name, "width": icon.width, "height": icon.height}
                for icon in component.icons
            ],
        },
        "Screenshots": [
            {
                "thumbnails": list(screenshot.thumbnails),
                "source-image": {
                    "url": screenshot.source_image.url,
                    "lang": screenshot.source_image.lang,
                },
            }
            for screenshot in component.screenshots
        ],
        "Provides": {
            "mimetypes": list(component.provides.mimetypes),
            "binaries": list(component.provides.binaries),
        },
    }


def render(component: Component) -> str:
    """Render ``component`` as a DEP-11 YAML document.

    Raises:
        SerializationError: PyYAML could not represent the data.
    """
    try:
        return yaml.safe_dump(
            to_dict(component),
            explicit_start=True,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )
    except yaml.YAMLError as e:
        raise SerializationError(f"Cannot render component {component.id!r}: {e}") from e


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise SerializationError(f"`{key}` must be a mapping, got {type(value).__name__}")
    return value


def from_dict(data: Dict[str, Any]) -> Component:
    """Rebuild a Component from the layout produced by :func:`to_dict`."""
    url = _section(data, "Url")
    provides = _section(data, "Provides")
    try:
        return Component(
            kind=data.get("Type"),
            id=data.get("ID"),
            package=data.get("Package"),
            name=_section(data, "Name").get(DEFAULT_LOCALE),
            summary=_section(data, "Summary").get(DEFAULT_LOCALE),
            description=_section(data, "Description").get(DEFAULT_LOCALE),
            developer_name=_section(data, "DeveloperName").get(DEFAULT_LOCALE),
            project_license=data.get("ProjectLicense"),
            categories=list(data.get("Categories") or []),
            keywords=list(data.get("Keywords") or []),
            url=Url(homepage=url.get("homepage"), bugtracker=url.get("bugtracker")),
            icons=[
                IconEntry(name=icon["name"], width=icon.get("width"), height=icon.get("height"))
                for icon in _section(data, "Icon").get("cached") or []
            ],
            screenshots=[
                Screenshot(
                    thumbnails=list(shot.get("thumbnails") or []),
                    source_image=SourceImage(**(shot.get("source-image") or {})),
                )
                for shot in data.get("Screenshots") or []
            ],
            provides=Provides(
                mimetypes=list(provides.get("mimetypes") or []),
                binaries=list(provides.get("binaries") or []),
            ),
        )
    except (KeyError, TypeError, AttributeError) as e:
        raise SerializationError(f"Unexpected DEP-11 layout: {e}") from e


def load(text: str) -> Component:
    """Parse DEP-11 YAML produced by :func:`render`.

    Raises:
        SerializationError: The text is not YAML or not a DEP-11 mapping.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SerializationError(f"Invalid YAML: {e}") from e
    if not isinstance(data, dict):
        raise SerializationError("DEP-11 document must be a mapping")
    return from_dict(data)
