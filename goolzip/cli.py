"""Command-line front end of the archiver."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from goolzip.compressing import compress_file
from goolzip.decompressing import decompress_file
from goolzip.folder import Mode, process_folder

_FILE_MARKER = "F"


def _ask_target() -> Path:
    """Prompt until an existing folder, or after "F" an existing file, is named."""
    answer = input(
        'Enter a folder name. If you want to change a single file, type "F": '
    ).strip()
    while answer != _FILE_MARKER:
        if Path(answer).is_dir():
            print("Such folder exists.")
            return Path(answer)
        print("No such directory found. Are you sure you provided absolute path?")
        answer = input().strip()
    while True:
        name = input("Enter a file name: ").strip()
        if Path(name).is_file():
            print("Such file exists.")
            return Path(name)
        print(
            "No such file or directory found. "
            "Are you sure you specified file extension?"
        )


def _ask_mode(is_folder: bool) -> Mode:
    """Prompt until the user picks C (compress) or D (decompress)."""
    what = "files" if is_folder else "file"
    while True:
        answer = input(
            f"Pick an option to compress or decompress the {what} (C / D): "
        ).strip()
        if answer in ("C", "D"):
            return Mode(answer)
        print("No such option, C - compress, D - decompress")


def _run_folder(folder: Path, mode: Mode) -> None:
    print("Compressing" if mode is Mode.COMPRESS else "Decompressing")
    for written in process_folder(folder, mode):
        print(f'File "{written}" written')


def _run_file(path: Path, mode: Mode) -> None:
    if mode is Mode.COMPRESS:
        print("Compressing")
        result = compress_file(path)
        print(f"Compression efficiency: {result.efficiency:f} %")
        print("File compressed successfully")
    else:
        print("Decompressing")
        decompress_file(path)
        print("File Decompressed successfully")


def main(argv: Optional[List[str]] = None) -> int:
    """Compress or decompress a file or a whole folder; asks for what is not given."""
    parser = argparse.ArgumentParser(
        prog="goolzip", description="Huffman archiver for files and folders."
    )
    parser.add_argument("path", nargs="?", help="file or folder to process")
    parser.add_argument(
        "-m", "--mode", choices=["C", "D"], help="C to compress, D to decompress"
    )
    args = parser.parse_args(argv)

    try:
        if args.path is None:
            target = _ask_target()
        else:
            target = Path(args.path)
            if not target.exists():
                print(f"{target}: no such file or directory", file=sys.stderr)
                return 1
        is_folder = target.is_dir()
        mode = Mode(args.mode) if args.mode else _ask_mode(is_folder)
        if is_folder:
            _run_folder(target, mode)
        else:
            _run_file(target, mode)
    except EOFError:
        print("\nNo more input.", file=sys.stderr)
        return 1
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print("Thank you for using this archiver!")
    return 0


if __name__ == "__main__":
    sys.exit(main())