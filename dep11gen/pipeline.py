import time
from typing import Iterator, List

from tqdm import tqdm

from dep11gen.config import PipelineConfig
from dep11gen.logging import get_logger
from dep11gen.model.document import Document
from dep11gen.steps.completion_step import CompletionStep
from dep11gen.steps.export_step import ExportStep
from dep11gen.steps.extract_step import ExtractionStep
from dep11gen.utils import find_format


def create_batches(input_files: List, batch_size: int) -> Iterator[List[Document]]:
    """Create batches of Document objects from input files.

    Args:
        input_files: List of Path objects pointing to input files
        batch_size: Number of documents per batch

    Yields:
        Batches of Document objects
    """
    batch = []
    for file_path in input_files:
        batch.append(Document(file_path=file_path, file_format=find_format(file_path)))
        if len(batch) >= batch_size:
            yield batch
            batch = []

    # Yield final batch if any documents remain
    if batch:
        yield batch


async def pipeline(cfg: PipelineConfig) -> List[Document]:
    """Run extraction, completion and export over every configured input.

    Returns:
        The documents that were exported.
    """
    logger = get_logger("pipeline")
    logger.info("Starting pipeline execution")
    start_time = time.perf_counter()

    input_files = cfg.inputs.get_files()
    logger.info(f"Processing {len(input_files)} files with batch size {cfg.batch_size}")

    steps = [ExtractionStep(cfg), CompletionStep(cfg), ExportStep(cfg)]

    exported = []
    with tqdm(total=len(input_files), desc="Converting", unit="file", disable=cfg.completion.interactive) as pbar:
        for batch in create_batches(input_files, cfg.batch_size):
            batch_docs = batch
            for step in steps:
                batch_docs = await step(batch_docs)
            exported.extend(batch_docs)
            pbar.update(len(batch))

    elapsed_time = time.perf_counter() - start_time
    logger.info(f"Pipeline completed in {elapsed_time:.2f} seconds")
    logger.info(f"Exported {len(exported)} of {len(input_files)} documents")
    return exported
