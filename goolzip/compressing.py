"""Huffman compression of byte strings and files."""

from __future__ import annotations

import io
import struct
from collections import Counter
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from goolzip.symbols import EXTENSION, Code, assign_codes, write_code_table
from goolzip.tree import build_huffman_tree

HEADER = struct.Struct("<ii")


@dataclass(frozen=True)
class CompressionResult:
    """An archive together with the figures describing it.

    ``full_bytes`` counts the complete bytes of encoded data and
    ``trailing_bits`` the bits used in the last, partial byte.
    """

    archive: bytes
    input_size: int
    full_bytes: int
    trailing_bits: int
    path: Optional[Path] = None

    @property
    def efficiency(self) -> float:
        """Share of the input saved by the encoded data, in percent."""
        if not self.input_size:
            return 0.0
        return (1.0 - self.full_bytes / self.input_size) * 100


def _code_values(codes: Dict[int, Code]) -> Dict[int, Tuple[int, int]]:
    values = {}
    for symbol, bits in codes.items():
        value = 0
        for position, bit in enumerate(bits):
            value |= bit << position
        values[symbol] = (value, len(bits))
    return values


def compress(data: bytes) -> CompressionResult:
    """Compress ``data`` into an archive: header, encoded bits, code table."""
    data = bytes(data)
    counts = Counter(data)
    codes = assign_codes(build_huffman_tree(counts)) if counts else {}
    values = _code_values(codes)

    encoded = bytearray()
    accumulator = 0
    pending = 0
    for byte in data:
        value, length = values[byte]
        accumulator |= value << pending
        pending += length
        while pending >= 8:
            encoded.append(accumulator & 0xFF)
            accumulator >>= 8
            pending -= 8
    full_bytes, trailing_bits = len(encoded), pending
    if pending:
        encoded.append(accumulator & 0xFF)

    try:
        header = HEADER.pack(full_bytes, trailing_bits)
    except struct.error as exc:
        raise ValueError("input too large for the archive header") from exc

    table = io.BytesIO()
    write_code_table(codes, table)
    return CompressionResult(
        archive=header + bytes(encoded) + table.getvalue(),
        input_size=len(data),
        full_bytes=full_bytes,
        trailing_bits=trailing_bits,
    )


def compress_file(path: Union[str, Path]) -> CompressionResult:
    """Compress a file into a sibling named with the archive extension appended."""
    source = Path(path)
    result = compress(source.read_bytes())
    target = source.with_name(source.name + EXTENSION)
    target.write_bytes(result.archive)
    return replace(result, path=target)