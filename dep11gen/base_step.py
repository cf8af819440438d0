from abc import ABC, abstractmethod
from typing import List, Optional

from dep11gen.config import PipelineConfig
from dep11gen.logging import get_logger
from dep11gen.model.document import Document


class PipelineStep(ABC):
    """One stage of the batch conversion.

    A step takes the documents of a batch and returns the ones that go on
    to the next stage; a document it cannot handle is logged and left out.
    """

    def __init__(self, config: PipelineConfig, name: Optional[str] = None):
        """
        Args:
            config: The whole pipeline configuration; steps read their own section.
            name: Name shown in log lines, the class name by default.
        """
        self.config = config
        self.debug = config.debug
        self.name = name or self.__class__.__name__
        self.logger = get_logger(self.name)

    @abstractmethod
    async def execute(self, documents: List[Document]) -> List[Document]:
        ...

    async def __call__(self, documents: List[Document]) -> List[Document]:
        self.logger.debug(f"{self.name}: {len(documents)} document(s) in")
        return await self.execute(documents)
