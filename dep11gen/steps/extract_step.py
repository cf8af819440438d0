import asyncio
from typing import List

from dep11gen.base_step import PipelineStep
from dep11gen.errors import Dep11Error
from dep11gen.model.document import Document
from dep11gen.parsing.extractor import ComponentExtractor
from dep11gen.parsing.reader import parse_file


class ExtractionStep(PipelineStep):
    """Parses every XML document of a batch into a Component."""

    def __init__(self, config, name: str = "ExtractionStep"):
        super().__init__(config, name)
        self.extractor = ComponentExtractor(debug=self.debug)

    async def _extract(self, document: Document) -> Document:
        # the parse itself is synchronous, keep it off the event loop
        document.component = await asyncio.to_thread(parse_file, document.file_path, self.extractor)
        return document

    async def execute(self, documents: List[Document]) -> List[Document]:
        """Parse the documents; failures are logged and the file dropped.

        Args:
            documents: Documents pointing at AppStream XML files.

        Returns:
            Documents with ``component`` set.
        """
        result = []
        for document in documents:
            if document.file_format != "xml":
                self.logger.error(f"Unsupported format: {document.file_format}")
                continue
            try:
                result.append(await self._extract(document))
                self.logger.info(f"Extracted {document.component.id or '<no id>'} from {document.filename}")
            except Dep11Error as e:
                self.logger.error(f"Failed to extract metadata from {document.filename}: {e}")
                continue
        return result
