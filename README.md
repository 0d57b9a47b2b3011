# goolzip

A small Huffman archiver. It compresses a single file, or every file in a
folder tree, into `.GOOOOOOL` archives. It also turns such archives back
into the original files. It uses only the standard library.

## Installation

```
pip install .
```

Install the test extra with `pip install .[test]` and run the tests with `pytest`.

## Command line

```
goolzip [PATH] [-m {C,D}]
```

- `PATH` is a file or a folder. If it is left out, the program prompts for
  a folder. At that prompt you can type `F` to be asked for a single file
  instead. The prompt repeats until an existing path is given.
- `-m C` compresses and `-m D` decompresses. If the option is left out, the
  program prompts for `C` or `D`.

When compressing, each file `name` is written as `name.GOOOOOOL` next to
it. For a single file, the program prints the compression efficiency and
keeps the original. For a folder, every file in the tree is compressed,
subfolders included, and each original is removed.

When decompressing, each `name.GOOOOOOL` is restored to `name`. For a
folder, only files with that extension are touched, and each archive is
removed after it is restored. A single archive file is kept.

The program exits with status 1 in these cases:

- the path does not exist;
- a file cannot be read or written;
- an archive is damaged;
- input ends while it is prompting.

To check that every file in a folder survives a round trip, run:

```
goolzip-selftest [FOLDER]
```

The self-test works on each file in turn:

1. It compresses the file to `name.GOOOOOOL`.
2. It decodes that archive and compares the result with the original.
3. It removes the archive again.

If any file does not match, it stops with an error and exit status 1.

## Library use

```python
from goolzip.compressing import compress, compress_file
from goolzip.decompressing import decompress, decompress_file
from goolzip.folder import Mode, process_folder
from goolzip.selftest import verify_file, verify_folder

result = compress(b"abracadabra")      # CompressionResult
assert decompress(result.archive) == b"abracadabra"
print(result.efficiency)               # percent saved by the encoded data

result = compress_file("notes.txt")    # writes notes.txt.GOOOOOOL
print(result.path)
restored = decompress_file("notes.txt.GOOOOOOL")  # writes notes.txt, returns its path

written = process_folder("some/folder", Mode.COMPRESS)  # or "C" / "D"
```

### `CompressionResult`

`CompressionResult` has these fields:

- `archive`: the archive bytes.
- `input_size`
- `full_bytes` and `trailing_bits`: the length of the encoded data.
- `path`: set by `compress_file`.

### Errors

- `decompress` and `decompress_file` raise `ValueError` for a damaged archive.
- `decompress_file` also raises `ValueError` for a name without the `.GOOOOOOL` extension.
- `process_folder` and `verify_folder` raise `NotADirectoryError` when the path is not a folder.

### Lower-level building blocks

- `goolzip.tree.build_huffman_tree(frequencies)` builds the code tree. It
  takes either a mapping from byte value to count, or a sequence of counts
  indexed by byte value. It returns `TreeNode` objects.
  - Frequencies saturate at `goolzip.tree.MAX_FREQUENCY`.
- `goolzip.heap.NodeHeap` is the min-heap used while building the tree.
- `goolzip.symbols.assign_codes(root)` maps each byte to a tuple of bits.
  - A left branch gives `1` and a right branch gives `0`.
  - Every code ends with one extra `0` bit.
- `goolzip.symbols.write_code_table` and `read_code_table` store and load
  the code table.
- `goolzip.bitset` provides `get_bit`, `bits_match` and `pack_bits`.

## Archive layout

An archive has three parts, in this order:

1. **Header**: two little-endian signed 32-bit integers.
   - The number of complete bytes of encoded data.
   - The number of bits used in a final partial byte, from 0 to 7.
2. **Encoded bit stream**: least significant bit first within each byte.
3. **Code table**: entries in ascending symbol order. Each entry holds:
   - one symbol byte;
   - the code length in bits, as a little-endian 32-bit integer;
   - the code bits, packed into `length // 8 + 1` bytes.

When decoding, the matching code for the lowest symbol is taken at each
position.

## What it does not do

Each file becomes its own archive. There is no single container for many
files. Archives carry no checksum or original file name; the name comes
from the archive's own name, minus `.GOOOOOOL`.