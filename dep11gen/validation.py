"""
Completeness validation for parsed components.

The validator walks the component's checklist top to bottom. The first
missing entry is handed to a fill callback together with a prompt, then
the walk starts again from the top. It stops once a full walk finds
nothing missing.

Termination is enforced rather than trusted: a callback that returns
without filling its slot raises UnfilledSlotError, and the number of
callbacks per run is capped (by default at the checklist length, since a
filled slot never becomes missing again).
"""

from typing import Callable, Optional

from dep11gen.errors import UnfilledSlotError, ValidatorStuckError
from dep11gen.logging import get_logger
from dep11gen.model.component import CHECKLIST, Component, Slot

Filler = Callable[[str, Slot], None]


class CompletenessValidator:
    def __init__(self, fill: Filler, max_prompts: Optional[int] = None):
        """
        Args:
            fill: Called as ``fill(prompt, slot)`` for each missing entry.
                Must leave ``slot`` non-missing before returning.
            max_prompts: Upper bound on ``fill`` calls per component.
        """
        if max_prompts is not None and max_prompts < 0:
            raise ValueError("max_prompts must be >= 0")
        self.fill = fill
        self.max_prompts = len(CHECKLIST) if max_prompts is None else max_prompts
        self.logger = get_logger(self.__class__.__name__)

    def first_missing(self, component: Component) -> Optional[Slot]:
        for slot in component.checklist():
            if slot.is_missing():
                return slot
        return None

    def complete(self, component: Component) -> int:
        """Fill every missing checklist entry of ``component`` in place.

        Returns:
            Number of times the fill callback was called.
        """
        prompts = 0
        while True:
            slot = self.first_missing(component)
            if slot is None:
                self.logger.debug(f"Component complete after {prompts} prompt(s)")
                return prompts

            if prompts >= self.max_prompts:
                raise ValidatorStuckError(self.max_prompts, slot.label)

            self.logger.debug(f"Missing `{slot.label}`, asking for it")
            self.fill(slot.prompt, slot)
            prompts += 1

            if slot.is_missing():
                raise UnfilledSlotError(slot.label)

    def __call__(self, component: Component) -> int:
        return self.complete(component)
