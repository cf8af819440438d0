from typing import List

from dep11gen.base_step import PipelineStep
from dep11gen.errors import Dep11Error
from dep11gen.fillers import DefaultsFiller, interactive_filler
from dep11gen.model.document import Document
from dep11gen.validation import CompletenessValidator


class CompletionStep(PipelineStep):
    """Fills missing mandatory fields, from the terminal or from defaults."""

    def __init__(self, config, name: str = "CompletionStep"):
        super().__init__(config, name)
        completion = config.completion
        fill = interactive_filler if completion.interactive else DefaultsFiller(completion.defaults)
        self.validator = CompletenessValidator(fill, max_prompts=completion.max_prompts)

    async def execute(self, documents: List[Document]) -> List[Document]:
        result = []
        for document in documents:
            missing = document.component.missing()
            if missing:
                self.logger.info(f"{document.filename} is missing {missing}")
            try:
                prompts = self.validator.complete(document.component)
            except Dep11Error as e:
                self.logger.warning(f"Skipping {document.filename}: {e}")
                continue
            document.add_metadata("filled", prompts)
            result.append(document)
        return result
