"""Assigning Huffman codes and storing the code table."""

from __future__ import annotations

import struct
from typing import BinaryIO, Dict, Tuple

from goolzip.bitset import get_bit, pack_bits
from goolzip.tree import TreeNode

EXTENSION = ".GOOOOOOL"

Code = Tuple[int, ...]

_LENGTH = struct.Struct("<i")


def assign_codes(root: TreeNode) -> Dict[int, Code]:
    """Map every leaf symbol of ``root`` to its code.

    A left branch contributes bit 1 and a right branch bit 0. Every code
    carries one trailing zero bit past its tree path, so a tree made of a
    single leaf still gives that symbol a non-empty code.
    """
    codes: Dict[int, Code] = {}

    def walk(node: TreeNode, path: Code) -> None:
        if node.left is not None:
            walk(node.left, path + (1,))
        if node.right is not None:
            walk(node.right, path + (0,))
        if node.is_leaf() and node.symbol not in codes:
            codes[node.symbol] = path + (0,)

    walk(root, ())
    return codes


def write_code_table(codes: Dict[int, Code], stream: BinaryIO) -> None:
    """Write the code table in ascending symbol order.

    Each entry is the symbol byte, the code length in bits as a little-endian
    32-bit integer, and the code bits packed into ``length // 8 + 1`` bytes.
    """
    for symbol in sorted(codes):
        bits = tuple(codes[symbol])
        if not 0 <= symbol <= 255:
            raise ValueError(f"symbol must be a byte value, got {symbol}")
        if not bits:
            raise ValueError(f"empty code for symbol {symbol}")
        size = len(bits) // 8 + 1
        stream.write(bytes([symbol]))
        stream.write(_LENGTH.pack(len(bits)))
        stream.write(pack_bits(bits).ljust(size, b"\0"))


def read_code_table(stream: BinaryIO) -> Dict[int, Code]:
    """Read a code table written by :func:`write_code_table` up to end of stream."""
    codes: Dict[int, Code] = {}
    while True:
        head = stream.read(1)
        if not head:
            return codes
        raw_length = stream.read(_LENGTH.size)
        if len(raw_length) < _LENGTH.size:
            raise ValueError("code table truncated in a length field")
        (length,) = _LENGTH.unpack(raw_length)
        if length < 1:
            raise ValueError(f"invalid code length {length} for symbol {head[0]}")
        size = length // 8 + 1
        body = stream.read(size)
        if len(body) < size:
            raise ValueError("code table truncated in a code")
        codes[head[0]] = tuple(get_bit(body, i) for i in range(length))