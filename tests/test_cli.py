"""Tests for the command line interface."""

import yaml
from click.testing import CliRunner

from dep11gen import __version__
from dep11gen.cli import main


def test_version():
    result = CliRunner().invoke(main, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_convert_with_defaults(appdata_file):
    result = CliRunner().invoke(main, ["convert", str(appdata_file), "--no-interactive", "-d", "Package=example-app"])

    assert result.exit_code == 0, result.output
    data = yaml.safe_load(result.output)
    assert data["ID"] == "org.example.App"
    assert data["Package"] == "example-app"


def test_convert_prompts_for_missing_fields(tmp_path):
    source = tmp_path / "app.xml"
    source.write_text(
        '<component type="desktop-application">'
        "<id>org.example.App</id>"
        "<summary>Example</summary>"
        "<description><p>An example.</p></description>"
        "<developer_name>Example Developers</developer_name>"
        '<url homepage="https://example.org"/>'
        "<icon>app</icon>"
        "<categories><category>Utility</category></categories>"
        "<screenshots><screenshot><image>shot.png</image></screenshot></screenshots>"
        "<mimetypes><mimetype>text/plain</mimetype></mimetypes>"
        "<provides><binary>app</binary></provides>"
        "</component>"
    )
    output = tmp_path / "app.yml"

    result = CliRunner().invoke(main, ["convert", str(source), "-o", str(output)], input="example-app\nfoo, bar\n")

    assert result.exit_code == 0, result.output
    assert "Please provide a `Package`." in result.output
    assert "Please provide a `Keywords`." in result.output
    data = yaml.safe_load(output.read_text(encoding="utf-8"))
    assert data["Package"] == "example-app"
    assert data["Keywords"] == ["foo", "bar"]


def test_convert_fails_without_value(tmp_path):
    source = tmp_path / "app.xml"
    source.write_text("<id>org.example.App</id>")

    result = CliRunner().invoke(main, ["convert", str(source), "--no-interactive"])

    assert result.exit_code == 1


def test_convert_missing_file(tmp_path):
    result = CliRunner().invoke(main, ["convert", str(tmp_path / "missing.xml"), "--no-interactive"])

    assert result.exit_code == 1


def test_convert_malformed_file(tmp_path):
    source = tmp_path / "broken.xml"
    source.write_text("<component>")

    result = CliRunner().invoke(main, ["convert", str(source), "--no-interactive"])

    assert result.exit_code == 1


def test_convert_rejects_bad_default(appdata_file):
    result = CliRunner().invoke(main, ["convert", str(appdata_file), "-d", "Package"])

    assert result.exit_code == 2


def test_run(tmp_path, appdata_file):
    config = tmp_path / "config.yaml"
    config.write_text(
        "pipeline:\n"
        f"  inputs:\n    path: {appdata_file}\n"
        f"  output:\n    output_dir: {tmp_path / 'out'}\n"
        "  completion:\n    defaults:\n      Package: example-app\n"
    )

    result = CliRunner().invoke(main, ["run", "-c", str(config)])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "out" / "org.example.App.appdata.yml").exists()


def test_run_missing_config(tmp_path):
    result = CliRunner().invoke(main, ["run", "-c", str(tmp_path / "nope.yaml")])

    assert result.exit_code == 1


def test_convert_to_stdout_keeps_prompts_out_of_yaml(tmp_path):
    source = tmp_path / "app.xml"
    source.write_text(
        '<component type="desktop-application">'
        "<id>org.example.App</id><summary>Example</summary>"
        "<description><p>An example.</p></description>"
        "<developer_name>Example Developers</developer_name>"
        '<url homepage="https://example.org"/><icon>app</icon>'
        "<categories><category>Utility</category></categories>"
        "<screenshots><screenshot><image>shot.png</image></screenshot></screenshots>"
        "<mimetypes><mimetype>text/plain</mimetype></mimetypes>"
        "<provides><binary>app</binary></provides>"
        "</component>"
    )

    result = CliRunner().invoke(main, ["convert", str(source)], input="example-app\nfoo\n")

    assert result.exit_code == 0, result.output
    assert result.stdout.startswith("---")
    assert "Please provide a `Package`." in result.stderr
    data = yaml.safe_load(result.stdout)
    assert data["Package"] == "example-app"
    assert data["Keywords"] == ["foo"]


def test_convert_unwritable_output(appdata_file, tmp_path):
    output = tmp_path / "out.yml"
    output.mkdir()

    result = CliRunner().invoke(main, ["convert", str(appdata_file), "--no-interactive", "-d", "Package=app", "-o", str(output)])

    assert result.exit_code == 1
    assert not isinstance(result.exception, OSError)
