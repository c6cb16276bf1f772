"""Extract the files stored in a PSXCD.IMG archive."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from .packer import IMAGE_FILE_NAME, LOC_FILE_NAME, NAME_FILE_NAME
from .tables import SECTOR_SIZE, LocEntry, read_loc_table, read_name_table

OUTPUT_DIR_NAME = "PSXCD"


def load_lookup(directory: str | os.PathLike = ".") -> tuple[list[LocEntry], list[str]]:
    """Read the location and name tables found in ``directory``."""
    base = Path(directory)
    with open(base / LOC_FILE_NAME, "rb") as handle:
        entries = read_loc_table(handle.read())
    with open(base / NAME_FILE_NAME, "rb") as handle:
        names = read_name_table(handle.read())
    return entries, names


def extract_image(directory: str | os.PathLike = ".") -> list[Path]:
    """Extract every listed file into a new ``PSXCD`` folder inside ``directory``.

    Extraction stops at the first all-zero location record, or with a message
    at the first file that cannot be written or read in full. Returns the
    paths of the files written completely.
    """
    base = Path(directory)
    entries, names = load_lookup(base)
    extracted: list[Path] = []

    with open(base / IMAGE_FILE_NAME, "rb") as image:
        out_dir = base / OUTPUT_DIR_NAME
        out_dir.mkdir(mode=0o755)

        for index, entry in enumerate(entries):
            if entry.is_empty():
                break
            name = names[index] if index < len(names) else ""
            print(f"Writing {name}...")

            display = f"{OUTPUT_DIR_NAME}/{name}"
            target = out_dir / name
            try:
                output = open(target, "wb")
            except OSError:
                print(f"Failed to open {display} for writing, aborted.")
                break

            with output:
                size = entry.stored_size()
                offset = entry.lba_start * SECTOR_SIZE
                image.seek(offset)
                data = image.read(size)
                if len(data) != size:
                    print(f"Error reading from {IMAGE_FILE_NAME} at offset 0x{offset:X}")
                    break
                output.write(data)
            extracted.append(target)

    return extracted


def main(argv: list[str] | None = None) -> int:
    """Extract the archive in the working directory."""
    try:
        load_lookup()
    except OSError as exc:
        missing = Path(exc.filename).name if exc.filename else LOC_FILE_NAME
        print(f"Failed to open {missing}!")
        return 1

    try:
        extract_image()
    except FileNotFoundError:
        print(f"Failed to open {IMAGE_FILE_NAME}!")
    except OSError:
        print("Failed to create output folder!")
    return 0