"""Tests for the component record and its slot handles."""

import pytest

from dep11gen.model.component import CHECKLIST, Component, IconEntry, Screenshot, SlotKind


def test_new_component_is_empty():
    component = Component()

    assert component.kind is None
    assert component.id is None
    assert component.categories == []
    assert component.icons == []
    assert component.url.homepage is None
    assert component.provides.binaries == []
    assert component.missing() == list(CHECKLIST)
    assert not component.is_complete()


def test_lists_are_not_shared_between_components():
    first, second = Component(), Component()
    first.keywords.append("a")
    first.provides.binaries.append("b")

    assert second.keywords == []
    assert second.provides.binaries == []


def test_checklist_order():
    labels = [slot.label for slot in Component().checklist()]

    assert labels == [
        "Type", "Id", "Package", "Summary", "Description", "DeveloperName",
        "Categories", "Keywords", "Url.homepage", "Icon", "Screenshots",
        "Provides.mimetypes", "Provides.binaries",
    ]


def test_complete_component_has_nothing_missing(complete_component):
    assert complete_component.missing() == []
    assert complete_component.is_complete()


def test_scalar_slot_sets_only_its_field():
    component = Component()
    slot = component.slot("Url.homepage")

    slot.set("https://example.org")

    assert component.url.homepage == "https://example.org"
    assert component.url.bugtracker is None
    assert not slot.is_missing()
    assert slot.prompt == "Please provide a `Url.homepage`."


def test_list_slot_uses_item_factory():
    component = Component()

    component.slot("Icon").append("app.svg")
    component.slot("Screenshots").extend(["one.png", "two.png"])

    assert component.icons == [IconEntry(name="app.svg")]
    assert component.screenshots == [Screenshot.from_url("one.png"), Screenshot.from_url("two.png")]
    assert component.screenshots[0].source_image.lang == "C"


def test_wrong_mutator_raises():
    component = Component()

    with pytest.raises(TypeError):
        component.slot("Categories").set("Utility")
    with pytest.raises(TypeError):
        component.slot("Type").append("desktop")


def test_slot_kinds():
    kinds = {slot.label: slot.kind for slot in Component().checklist()}

    assert kinds["Package"] is SlotKind.SCALAR
    assert kinds["Provides.mimetypes"] is SlotKind.LIST


def test_empty_string_counts_as_present():
    component = Component(package="")

    assert "Package" not in component.missing()


def test_unknown_slot_label():
    with pytest.raises(KeyError):
        Component().slot("Name")
