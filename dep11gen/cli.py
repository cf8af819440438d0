"""Command line interface for dep11gen."""

import asyncio
import sys
from pathlib import Path
from typing import Optional

import click

from dep11gen import __version__
from dep11gen.config import load_config
from dep11gen.errors import Dep11Error
from dep11gen.fillers import DefaultsFiller, interactive_filler, split_values
from dep11gen.logging import add_log_file, get_logger, set_log_level
from dep11gen.parsing.extractor import ComponentExtractor
from dep11gen.parsing.reader import parse_file
from dep11gen.pipeline import pipeline
from dep11gen.render import render
from dep11gen.validation import CompletenessValidator

logger = get_logger("cli")


def _parse_defaults(pairs: tuple[str, ...]) -> dict:
    defaults = {}
    for pair in pairs:
        label, sep, value = pair.partition("=")
        if not sep:
            raise click.BadParameter(f"expected LABEL=VALUE, got {pair!r}", param_hint="--default")
        defaults[label.strip()] = split_values(value) if "," in value else value.strip()
    return defaults


@click.group()
@click.version_option(version=__version__, prog_name="dep11gen")
def main():
    """Generate DEP-11 YAML metadata from AppStream XML."""


@main.command()
@click.argument("input_path", type=click.Path(path_type=Path))
@click.option("--output", "-o", type=click.Path(path_type=Path), help="Write YAML here instead of stdout")
@click.option("--interactive/--no-interactive", default=True, help="Prompt for missing mandatory fields")
@click.option("--default", "-d", "defaults", multiple=True, metavar="LABEL=VALUE",
              help="Value for a missing field, e.g. -d Package=foo (can be used multiple times)")
@click.option("--max-prompts", type=click.IntRange(min=0), help="Give up after this many prompts")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def convert(
    input_path: Path,
    output: Optional[Path],
    interactive: bool,
    defaults: tuple[str, ...],
    max_prompts: Optional[int],
    debug: bool,
):
    """Convert one AppStream file to DEP-11 YAML."""
    if debug:
        set_log_level("DEBUG")

    try:
        filler = DefaultsFiller(_parse_defaults(defaults))
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--default")

    def fill(prompt, slot):
        if slot.label in filler.defaults:
            filler(prompt, slot)
        elif interactive:
            interactive_filler(prompt, slot)

    try:
        component = parse_file(input_path, ComponentExtractor(debug=debug))
        CompletenessValidator(fill, max_prompts=max_prompts).complete(component)
        text = render(component)
    except Dep11Error as e:
        logger.error(str(e))
        sys.exit(1)

    if output:
        try:
            output.write_text(text, encoding="utf-8")
        except OSError as e:
            logger.error(f"Cannot write {output}: {e}")
            sys.exit(1)
        logger.info(f"Saved file: {output}")
    else:
        click.echo(text, nl=False)


@main.command()
@click.option("--config", "-c", "config_path", type=click.Path(path_type=Path), default="config.yaml",
              show_default=True, help="Configuration file path")
def run(config_path: Path):
    """Run the batch pipeline described by a config file."""
    try:
        cfg = load_config(config_path)
    except Dep11Error as e:
        logger.error(str(e))
        sys.exit(1)

    set_log_level("DEBUG" if cfg.debug else cfg.log_level)
    if cfg.log_file:
        add_log_file(cfg.log_file, level="ERROR")

    exported = asyncio.run(pipeline(cfg))
    if len(exported) < len(cfg.inputs.get_files()):
        sys.exit(1)


if __name__ == "__main__":
    main()
