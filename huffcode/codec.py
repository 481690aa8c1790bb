import io
import logging
from typing import Dict, Iterable, List, Tuple

from bitpack import BitWriter, BitReader
from bitstream import write_header, write_table, read_header, read_table
from huff_canonical import code_lengths, tree_from_lengths
from huffman import (
    CorruptStreamError, Node, Symbol, SymbolNotInTableError,
    build_codebook, build_frequencies, build_tree,
)

logger = logging.getLogger(__name__)


def encode(symbols: Iterable[Symbol], codebook: Dict[Symbol, str]) -> Tuple[bytes, int]:
    """
    Returns:
      payload: bytes, MSB-first, last byte zero-padded
      nbits: number of meaningful bits in payload
    """
    bw = BitWriter()
    for sym in symbols:
        try:
            code = codebook[sym]
        except KeyError:
            raise SymbolNotInTableError(sym) from None
        bw.write_bits(code)
    payload = bw.finish()
    logger.debug("encoded %d bits into %d bytes", bw.nbits, len(payload))
    return payload, bw.nbits


def decode(payload: bytes, nbits: int, root: Node, *, strict: bool = True) -> List[Symbol]:
    """
    Walk the tree bit by bit: 0 -> left, 1 -> right. A leaf emits its symbol
    and resets the cursor to the root.

    strict=True raises CorruptStreamError on a short payload, a step into a
    missing child, or bits ending in the middle of a code. strict=False skips
    bits once the cursor falls off the tree and drops an unfinished code.
    """
    try:
        br = BitReader(payload, nbits)
    except EOFError as e:
        if strict:
            raise CorruptStreamError(str(e)) from e
        br = BitReader(payload)

    out = []
    cur = root
    for bit in br:
        if cur is None or cur.is_empty:
            if strict:
                raise CorruptStreamError(f"bit {br.i - 1} does not follow any code")
            continue
        cur = cur.right if bit else cur.left
        if cur is None:
            if strict:
                raise CorruptStreamError(f"bit {br.i - 1} leads to a missing branch")
            continue
        if cur.is_leaf:
            out.append(cur.sym)
            cur = root

    if cur is not root:
        if strict:
            raise CorruptStreamError("Truncated stream: bits end inside a code")
        logger.debug("discarding unfinished code at end of stream")
    return out


def decode_text(payload: bytes, nbits: int, root: Node, *, strict: bool = True) -> str:
    return "".join(decode(payload, nbits, root, strict=strict))


def compress_text(text: str) -> bytes:
    """
    Self-contained archive: header, canonical code-length table, payload.
    The payload is coded with the canonical tree rebuilt from the lengths,
    so the decoder reconstructs exactly the same tree.
    """
    tree = build_tree(build_frequencies(text))
    lengths = code_lengths(tree)
    ctree = tree_from_lengths(lengths)
    payload, nbits = encode(text, build_codebook(ctree))

    f = io.BytesIO()
    write_header(f, table_len=len(lengths), nbits=nbits)
    write_table(f, sorted(lengths.items()))
    f.write(payload)
    return f.getvalue()


def decompress_text(blob: bytes, *, strict: bool = True) -> str:
    f = io.BytesIO(blob)
    h = read_header(f)
    entries = read_table(f, h["table_len"])
    lengths = dict(entries)
    if len(lengths) != len(entries):
        raise ValueError("Malformed stream: duplicate symbol in table")

    nbits = h["nbits"]
    payload = f.read((nbits + 7) // 8)
    if len(payload) != (nbits + 7) // 8:
        raise CorruptStreamError("Malformed stream: payload truncated")
    if strict and f.read(1):
        raise CorruptStreamError("Malformed stream: trailing data")

    tree = tree_from_lengths(lengths)
    return decode_text(payload, nbits, tree, strict=strict)
