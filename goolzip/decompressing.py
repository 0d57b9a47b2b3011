"""Huffman decompression of archives made by the compressing module."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Dict, Union

from goolzip.compressing import HEADER
from goolzip.symbols import EXTENSION, Code, read_code_table


def decompress(data: bytes) -> bytes:
    """Restore the original bytes from an archive.

    Where several codes match at a position, the lowest symbol is taken.
    """
    data = bytes(data)
    if len(data) < HEADER.size:
        raise ValueError("archive too short for its header")
    full_bytes, trailing_bits = HEADER.unpack_from(data)
    if full_bytes < 0 or not 0 <= trailing_bits < 8:
        raise ValueError(f"invalid archive header ({full_bytes}, {trailing_bits})")
    total = full_bytes * 8 + trailing_bits
    size = full_bytes + (1 if trailing_bits else 0)
    payload = data[HEADER.size:HEADER.size + size]
    if len(payload) < size:
        raise ValueError("archive truncated in its encoded data")
    codes = read_code_table(io.BytesIO(data[HEADER.size + size:]))

    lookup: Dict[Code, int] = {}
    for symbol in sorted(codes, reverse=True):
        lookup[codes[symbol]] = symbol
    longest = max((len(code) for code in lookup), default=0)

    bits = [(byte >> offset) & 1 for byte in payload for offset in range(8)]
    output = bytearray()
    position = 0
    while position < total:
        best = None
        best_length = 0
        prefix: Code = ()
        for length in range(1, min(longest, len(bits) - position) + 1):
            prefix += (bits[position + length - 1],)
            symbol = lookup.get(prefix)
            if symbol is not None and (best is None or symbol < best):
                best, best_length = symbol, length
        if best is None:
            raise ValueError(f"no code matches the data at bit {position}")
        output.append(best)
        position += best_length
    return bytes(output)


def decompress_file(path: Union[str, Path]) -> Path:
    """Decompress an archive file next to it, dropping the archive extension.

    Returns the path of the restored file.
    """
    source = Path(path)
    if not source.name.endswith(EXTENSION) or source.name == EXTENSION:
        raise ValueError(f"{source} does not carry the {EXTENSION} extension")
    target = source.with_name(source.name[: -len(EXTENSION)])
    target.write_bytes(decompress(source.read_bytes()))
    return target