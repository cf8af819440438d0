"""Fill callbacks for the completeness validator."""

from typing import Dict, List, Mapping, Union

import click

from dep11gen.logging import get_logger
from dep11gen.model.component import CHECKLIST, Slot, SlotKind

logger = get_logger("fillers")

DefaultValue = Union[str, List[str]]


def split_values(raw: str) -> List[str]:
    """Split a comma separated answer into its non-empty parts."""
    return [part.strip() for part in raw.split(",") if part.strip()]


def interactive_filler(prompt: str, slot: Slot) -> None:
    """Ask on the terminal until the slot has a value.

    List slots take a comma separated answer.
    """
    while slot.is_missing():
        if slot.kind is SlotKind.LIST:
            answer = click.prompt(f"{prompt} (comma separated)", type=str, err=True)
            slot.extend(split_values(answer))
        else:
            answer = click.prompt(prompt, type=str, err=True).strip()
            if answer:
                slot.set(answer)


class DefaultsFiller:
    """Fills slots from a label -> value mapping, for unattended runs.

    A label with no default leaves the slot missing, which the validator
    reports as UnfilledSlotError.
    """

    def __init__(self, defaults: Mapping[str, DefaultValue]):
        unknown = set(defaults) - set(CHECKLIST)
        if unknown:
            raise ValueError(f"Unknown checklist entries: {sorted(unknown)}")
        self.defaults: Dict[str, DefaultValue] = dict(defaults)

    def __call__(self, prompt: str, slot: Slot) -> None:
        value = self.defaults.get(slot.label)
        if value is None:
            logger.warning(f"No default for `{slot.label}`")
            return

        if slot.kind is SlotKind.LIST:
            slot.extend([value] if isinstance(value, str) else value)
        else:
            slot.set(value if isinstance(value, str) else ", ".join(value))
        logger.info(f"Filled `{slot.label}` from defaults")
