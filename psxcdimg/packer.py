"""Build a PSXCD.IMG archive and its lookup tables from a directory."""

from __future__ import annotations

import errno
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

from .listing import iter_dir
from .tables import SECTOR_SIZE, LocEntry, write_loc_table, write_name_table

LOC_FILE_NAME = "PSXCDLOC.BIN"
NAME_FILE_NAME = "PSXCDNAM.BIN"
IMAGE_FILE_NAME = "PSXCD.IMG"
MAX_FILES = 256


@dataclass
class PackResult:
    """What went into an archive: names and locations in image order."""

    names: list[str] = field(default_factory=list)
    entries: list[LocEntry] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def pack_directory(source: str | os.PathLike, output_dir: str | os.PathLike = ".") -> PackResult:
    """Pack the regular files of ``source`` into an image in ``output_dir``.

    Files are taken in directory order, sub-directories and empty files are
    left out, and at most 256 files are stored. Each file starts on a
    2048-byte sector boundary and is zero-padded to the next one. The lookup
    tables are written even if reading the directory fails part way.
    """
    source = os.fspath(source)
    if not os.path.isdir(source):
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), source)

    out = Path(output_dir)
    result = PackResult()
    try:
        with open(out / IMAGE_FILE_NAME, "wb") as image:
            for info in iter_dir(source):
                if len(result.entries) >= MAX_FILES:
                    break
                if info.is_dir:
                    continue
                with open(info.path, "rb") as handle:
                    data = handle.read()
                if not data:
                    print(f"[WARN] {info.name} size is zero, skipping...")
                    result.skipped.append(info.name)
                    continue

                if result.entries:
                    previous = result.entries[-1]
                    lba_start = previous.lba_start + previous.block_size
                else:
                    lba_start = 0
                blocks = -(-len(data) // SECTOR_SIZE)

                image.write(data)
                image.write(bytes(blocks * SECTOR_SIZE - len(data)))
                print(f"Writing {info.path}...")

                result.entries.append(LocEntry(lba_start, blocks, len(data)))
                result.names.append(info.name)
    finally:
        (out / NAME_FILE_NAME).write_bytes(write_name_table(result.names))
        (out / LOC_FILE_NAME).write_bytes(write_loc_table(result.entries))
    return result


def main(argv: list[str] | None = None) -> int:
    """Pack the directory named on the command line into the working directory."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "psxcdimg-pack"
        print(f"USAGE: {prog} <directory>")
        return 1

    source = args[0]
    if not os.path.isdir(source):
        print(f"Failed to open {source}!")
        return 1
    try:
        pack_directory(source)
    except OSError as exc:
        print(f"Error getting file.: {exc.strerror or exc}", file=sys.stderr)
        return 1
    return 0