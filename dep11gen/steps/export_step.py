from pathlib import Path
from typing import List

from dep11gen.base_step import PipelineStep
from dep11gen.errors import SerializationError
from dep11gen.model.document import Document
from dep11gen.render import render
from dep11gen.utils import write_file


class ExportStep(PipelineStep):

    def __init__(self, config, name: str = "ExportStep"):
        """Initialize the export step.

        Args:
            config: Pipeline configuration; uses ``output.output_dir`` and
                ``output.extension``.
            name: Name for logging purposes
        """
        super().__init__(config, name)
        self.output_dir = Path(config.output.output_dir)
        self.extension = config.output.extension.lstrip(".")

    async def execute(self, documents: List[Document]) -> List[Document]:
        if not self.output_dir.exists():
            self.logger.info(f"{self.output_dir} does not exist. creating...")
            self.output_dir.mkdir(parents=True, exist_ok=True)

        result = []
        for document in documents:
            try:
                document.content = render(document.component)
            except SerializationError as e:
                self.logger.error(f"Failed to render {document.filename}: {e}")
                continue

            output_file = self.output_dir / f"{document.stem}.{self.extension}"
            try:
                await write_file(output_file, document.content)
            except OSError as e:
                self.logger.error(f"Failed to write {output_file}: {e}")
                continue
            self.logger.info(f"Saved file: {output_file}")
            result.append(document)
        return result
