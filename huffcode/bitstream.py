import struct
from typing import List, Tuple

MAGIC = b"HUFC"
VERSION = 1

# Header (little-endian):
# magic(4) version(1) flags(1) table_len(u32) nbits(u64)
HDR_FMT = "<4sBBIQ"
HDR_SIZE = struct.calcsize(HDR_FMT)

# Code-length table entry:
# codepoint(u32) codelen(u8)
TBL_FMT = "<IB"
TBL_SIZE = struct.calcsize(TBL_FMT)

MAX_CODE_LEN = 255


def write_header(f, *, table_len: int, nbits: int, flags: int = 0):
    f.write(struct.pack(HDR_FMT, MAGIC, VERSION, flags, table_len, nbits))


def read_header(f):
    data = f.read(HDR_SIZE)
    if len(data) != HDR_SIZE:
        raise ValueError("Malformed stream: header too short")
    magic, ver, flags, table_len, nbits = struct.unpack(HDR_FMT, data)
    if magic != MAGIC:
        raise ValueError("Bad magic number (not HUFC)")
    if ver != VERSION:
        raise ValueError(f"Unsupported version: {ver}")
    return dict(flags=flags, table_len=table_len, nbits=nbits)


def write_table(f, entries: List[Tuple[str, int]]):
    for ch, L in entries:
        if len(ch) != 1:
            raise ValueError(f"symbol must be a single character, got {ch!r}")
        if not (1 <= L <= MAX_CODE_LEN):
            raise ValueError(f"code length out of range (1..{MAX_CODE_LEN})")
        f.write(struct.pack(TBL_FMT, ord(ch), L))


def read_table(f, table_len: int):
    entries = []
    for _ in range(table_len):
        data = f.read(TBL_SIZE)
        if len(data) != TBL_SIZE:
            raise ValueError("Malformed stream: table truncated")
        cp, L = struct.unpack(TBL_FMT, data)
        if cp > 0x10FFFF:
            raise ValueError(f"code point out of range: {cp:#x}")
        if L == 0:
            raise ValueError("zero code length in table")
        entries.append((chr(cp), int(L)))
    return entries
