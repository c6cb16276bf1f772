# psxcdimg

Tools for the `PSXCD.IMG` archive format. An archive comes with two lookup
tables:

- `PSXCDLOC.BIN`: 4096 bytes of location records, three little-endian
  32-bit values per file (start sector, sector count, file size). Sectors
  are 2048 bytes. An all-zero record ends the table.
- `PSXCDNAM.BIN`: 8192 bytes of file names, 32 NUL-padded bytes per file.

## Installation

```
pip install .
```

## Packing

```
psxcd-pack <directory>
```

This writes `PSXCD.IMG`, `PSXCDLOC.BIN` and `PSXCDNAM.BIN` into the current
directory. The archive takes the regular files of `<directory>` in the order
the directory lists them, at most 256 of them. Subdirectories are skipped,
and empty files are skipped with a warning. Each file starts on a sector
boundary and is zero-padded to a whole number of 2048-byte sectors. Names
longer than 32 bytes are cut to fit. The two lookup tables are written even
if reading the directory fails part way.

Without an argument the command prints a usage line and exits with status 1;
it does the same with a message when the directory cannot be opened.

From Python:

```python
from psxcdimg.packer import pack_directory

result = pack_directory("assets", "out")
print(result.names, result.entries, result.skipped)
```

`pack_directory` returns a `PackResult` with the stored names, their
`LocEntry` records in image order, and the names of skipped empty files. It
raises `FileNotFoundError` when the source is not a directory.

## Unpacking

```
psxcd-unpack
```

Run this in a directory that holds `PSXCD.IMG`, `PSXCDLOC.BIN` and
`PSXCDNAM.BIN`. It takes no arguments. It creates a `PSXCD` folder, which
must not exist yet, and writes each archived file into it, stopping at the
first empty location record. If a file cannot be opened for writing, or the
image holds fewer bytes than a record asks for, it prints a message and stops
there. When either table is missing it reports which one and exits with
status 1.

From Python:

```python
from psxcdimg.unpacker import load_lookup, extract_image

entries, names = load_lookup("game_data")
written = extract_image("game_data")
```

`extract_image` returns the paths of the files it wrote in full. It raises
`FileNotFoundError` when a table or the image is missing and
`FileExistsError` when the `PSXCD` folder already exists.

## Table helpers

`psxcdimg.tables` reads and writes the two lookup tables:
`read_loc_table`, `write_loc_table`, `read_name_table` and `write_name_table`.
Short input is read as if zero-filled; writing more records than a table
holds, or a value outside 32 bits, raises `ValueError`.

Each location record is a `LocEntry` with `lba_start`, `block_size` and
`filesize`. `LocEntry.is_empty()` tells whether a record is all zero, and
`LocEntry.stored_size()` works out the number of bytes to extract from the
sector count and the recorded size.

## Directory listing

`psxcdimg.listing` offers `iter_dir` (every entry of a directory, `.` and
`..` included, as `FileInfo` records), `list_dir_sorted` (directories first,
then by name bytes) and `file_info` (one path looked up in its parent).
`FileInfo.extension` is the text after the last dot of the name.

## Running the tests

```
pip install .[test]
pytest
```