"""Pytest configuration and fixtures for dep11gen tests."""

from pathlib import Path

import pytest

from dep11gen.logging import set_log_level
from dep11gen.model.component import Component, IconEntry, Provides, Screenshot, Url


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Set up logging for tests."""
    set_log_level("DEBUG")


@pytest.fixture
def appdata_xml() -> str:
    """A realistic AppStream file touching every recognized tag."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<!-- Copyright 2018 Example Developers -->
<component type="desktop-application">
  <id>org.example.App</id>
  <metadata_license>CC0-1.0</metadata_license>
  <project_license>GPL-3.0+</project_license>
  <name>Example App</name>
  <name xml:lang="de">Beispiel App</name>
  <summary>Does example things</summary>
  <summary xml:lang="de">Macht Beispieldinge</summary>
  <description>
    <p xml:lang="de">Eine Beispielanwendung.</p>
    <p>
      An example application.
    </p>
    <p>It has a second paragraph.</p>
    <ul>
      <li>Feature one</li>
    </ul>
  </description>
  <developer_name>Example Developers</developer_name>
  <url homepage="https://example.org" bugtracker="https://example.org/issues"/>
  <icon type="stock">example-app</icon>
  <categories>
    <category>Utility</category>
    <category>Development</category>
  </categories>
  <keywords>
    <keyword>example</keyword>
    <keyword>demo</keyword>
  </keywords>
  <screenshots>
    <screenshot type="default">
      <image>https://example.org/shot1.png</image>
    </screenshot>
    <screenshot>
      <image>https://example.org/shot2.png</image>
    </screenshot>
  </screenshots>
  <mimetypes>
    <mimetype>text/plain</mimetype>
    <mimetype>text/markdown</mimetype>
  </mimetypes>
  <provides>
    <binary>example-app</binary>
    <binary>example-cli</binary>
  </provides>
</component>
"""


@pytest.fixture
def appdata_file(tmp_path, appdata_xml) -> Path:
    path = tmp_path / "org.example.App.appdata.xml"
    path.write_text(appdata_xml, encoding="utf-8")
    return path


@pytest.fixture
def complete_component() -> Component:
    """A component with every checklist entry filled."""
    return Component(
        kind="desktop-application",
        id="org.example.App",
        package="example-app",
        name="Example App",
        summary="Does example things",
        description="An example application.",
        developer_name="Example Developers",
        project_license="GPL-3.0+",
        categories=["Utility", "Development"],
        keywords=["example", "demo"],
        url=Url(homepage="https://example.org", bugtracker="https://example.org/issues"),
        icons=[IconEntry(name="example-app.png")],
        screenshots=[Screenshot.from_url("https://example.org/shot1.png")],
        provides=Provides(mimetypes=["text/plain"], binaries=["example-app"]),
    )
