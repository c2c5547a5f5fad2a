# speckit/emit/writer.py
"""
Writes an emitted file map to disk.

Not transactional: a failure partway leaves earlier files in place.
Emission is deterministic, so re-running reproduces the same tree.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Mapping, Union

from speckit.logging.logger import get_logger
from speckit.logging.tags import EMIT

logger = get_logger(__name__)


def write_files(files: Mapping[str, str], output_dir: Union[str, Path]) -> List[Path]:
    """
    Write `files` (relative path -> text) under `output_dir`.

    Returns:
        Written paths, in the order of `files`
    """
    root = Path(output_dir)
    written: List[Path] = []

    for relative, content in files.items():
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        written.append(target)
        logger.debug(f"{EMIT} Wrote {target}")

    return written


__all__ = ["write_files"]
