"""Compressing or decompressing every file below a folder."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Union

from goolzip.compressing import compress_file
from goolzip.decompressing import decompress_file
from goolzip.symbols import EXTENSION


class Mode(Enum):
    COMPRESS = "C"
    DECOMPRESS = "D"


def process_folder(folder: Union[str, Path], mode: Union[Mode, str]) -> List[Path]:
    """Walk ``folder`` recursively, replacing each file with its archive or its original.

    In decompress mode only files with the archive extension are touched.
    Returns the paths of the files written.
    """
    root = Path(folder)
    mode = Mode(mode)
    if not root.is_dir():
        raise NotADirectoryError(f"{root} is not a directory")
    written: List[Path] = []
    for entry in sorted(root.iterdir()):
        if entry.is_dir():
            written.extend(process_folder(entry, mode))
        elif mode is Mode.COMPRESS:
            result = compress_file(entry)
            entry.unlink()
            written.append(result.path)
        elif entry.name.endswith(EXTENSION):
            written.append(decompress_file(entry))
            entry.unlink()
    return written