"""Checking that compression followed by decompression gives back the input."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Union

from goolzip.compressing import CompressionResult, compress_file
from goolzip.decompressing import decompress


def verify_file(path: Union[str, Path]) -> CompressionResult:
    """Compress a file, decompress the archive and compare with the original.

    The archive file is removed afterwards. Raises ValueError on any mismatch.
    """
    source = Path(path)
    original = source.read_bytes()
    result = compress_file(source)
    try:
        restored = decompress(result.path.read_bytes())
    finally:
        result.path.unlink(missing_ok=True)
    if restored != original:
        mismatch = next(
            (i for i, (a, b) in enumerate(zip(original, restored)) if a != b),
            min(len(original), len(restored)),
        )
        raise ValueError(f"{source}: restored data differs at byte {mismatch}")
    return result


def verify_folder(path: Union[str, Path]) -> List[Path]:
    """Verify every file below ``path`` recursively; return the files checked."""
    root = Path(path)
    if not root.is_dir():
        raise NotADirectoryError(f"{root} is not a directory")
    checked: List[Path] = []
    for entry in sorted(root.iterdir()):
        if entry.is_dir():
            checked.extend(verify_folder(entry))
        else:
            verify_file(entry)
            checked.append(entry)
    return checked


def _ask_folder() -> Path:
    answer = input("Enter a folder name for testing: ").strip()
    while not Path(answer).is_dir():
        print("No such directory found. Are you sure you provided absolute path?")
        answer = input().strip()
    print("Such folder exists.")
    return Path(answer)


def main(argv: Optional[List[str]] = None) -> int:
    """Verify every file of a folder; asks for the folder when none is given."""
    parser = argparse.ArgumentParser(
        prog="goolzip-selftest",
        description="Check that every file of a folder survives a round trip.",
    )
    parser.add_argument("folder", nargs="?", help="folder to test")
    args = parser.parse_args(argv)
    try:
        folder = _ask_folder() if args.folder is None else Path(args.folder)
        for checked in verify_folder(folder):
            print(f'File "{checked}" compressed, data is equal')
    except EOFError:
        print("\nNo more input.", file=sys.stderr)
        return 1
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print("All tests have run successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())