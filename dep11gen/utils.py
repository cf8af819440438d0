from pathlib import Path

import aiofiles


def find_format(file_path: Path):
    return file_path.suffix.lstrip('.').lower()


async def write_file(file_path: Path, content: str, encoding: str = "utf-8") -> None:
    async with aiofiles.open(file_path, "w", encoding=encoding) as f:
        await f.write(content)
