"""Lookup tables that describe the contents of a PSXCD.IMG archive.

The archive comes with two side tables:

* ``PSXCDLOC.BIN`` holds one record per file: the first sector (LBA) of
  the file inside the image, the number of 2048-byte sectors it spans and
  its exact size in bytes, each stored as a little-endian 32-bit integer.
* ``PSXCDNAM.BIN`` holds one 32-byte, NUL-padded file name per record.
"""

from __future__ import annotations

import os
import struct
from collections.abc import Iterable
from dataclasses import dataclass

SECTOR_SIZE = 0x800

_LOC_STRUCT = struct.Struct("<III")
LOC_ENTRY_SIZE = _LOC_STRUCT.size
LOC_ENTRY_COUNT = 0x1000 // LOC_ENTRY_SIZE
LOC_TABLE_SIZE = LOC_ENTRY_COUNT * LOC_ENTRY_SIZE

NAME_FIELD_SIZE = 32
NAME_ENTRY_COUNT = 0x2000 // NAME_FIELD_SIZE
NAME_TABLE_SIZE = NAME_ENTRY_COUNT * NAME_FIELD_SIZE

_UINT32_MAX = 0xFFFFFFFF


@dataclass(frozen=True)
class LocEntry:
    """Location of one file inside the image."""

    lba_start: int = 0
    block_size: int = 0
    filesize: int = 0

    def is_empty(self) -> bool:
        """True for an all-zero record, which ends the table."""
        return self.lba_start == 0 and self.block_size == 0 and self.filesize == 0

    def stored_size(self) -> int:
        """Number of bytes to extract, derived from the sector count and size."""
        tail = self.filesize & (SECTOR_SIZE - 1)
        if tail == 0 and self.block_size != 0:
            tail = SECTOR_SIZE
        size = (self.block_size - 1) * SECTOR_SIZE + tail
        return max(size, 0)


def read_loc_table(data: bytes) -> list[LocEntry]:
    """Parse a location table; missing trailing bytes count as zero."""
    raw = bytes(data[:LOC_TABLE_SIZE]).ljust(LOC_TABLE_SIZE, b"\0")
    return [LocEntry(*fields) for fields in _LOC_STRUCT.iter_unpack(raw)]


def write_loc_table(entries: Iterable[LocEntry]) -> bytes:
    """Serialise location records into a zero-filled table of fixed size."""
    items = list(entries)
    if len(items) > LOC_ENTRY_COUNT:
        raise ValueError(
            f"location table holds at most {LOC_ENTRY_COUNT} entries, got {len(items)}"
        )
    chunks = []
    for entry in items:
        fields = (entry.lba_start, entry.block_size, entry.filesize)
        if any(not 0 <= value <= _UINT32_MAX for value in fields):
            raise ValueError(f"location entry out of 32-bit range: {entry!r}")
        chunks.append(_LOC_STRUCT.pack(*fields))
    return b"".join(chunks).ljust(LOC_TABLE_SIZE, b"\0")


def read_name_table(data: bytes) -> list[str]:
    """Parse a name table; each name is cut at its first NUL, at most 31 bytes."""
    raw = bytes(data[:NAME_TABLE_SIZE]).ljust(NAME_TABLE_SIZE, b"\0")
    names = []
    for start in range(0, NAME_TABLE_SIZE, NAME_FIELD_SIZE):
        field = raw[start:start + NAME_FIELD_SIZE - 1]
        names.append(os.fsdecode(field.split(b"\0", 1)[0]))
    return names


def write_name_table(names: Iterable[str]) -> bytes:
    """Serialise names into 32-byte fields, truncating longer names."""
    items = list(names)
    if len(items) > NAME_ENTRY_COUNT:
        raise ValueError(
            f"name table holds at most {NAME_ENTRY_COUNT} entries, got {len(items)}"
        )
    fields = [
        os.fsencode(name)[:NAME_FIELD_SIZE].ljust(NAME_FIELD_SIZE, b"\0")
        for name in items
    ]
    return b"".join(fields).ljust(NAME_TABLE_SIZE, b"\0")