import argparse
import logging
import os
from bitstream import HDR_SIZE, TBL_SIZE
from codec import compress_text
from huffman import build_codebook, build_frequencies, build_tree
from metrics import average_code_length, compression_ratio, entropy

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="path to input text file")
    ap.add_argument("--output", required=True, help="path to .huf archive")
    ap.add_argument("--encoding", default="utf-8", help="text encoding of input (default utf-8)")
    ap.add_argument("--stats", action="store_true", help="print entropy and code length stats")
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    args = ap.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    # newline="" keeps line endings byte-exact through the round trip
    with open(args.input, "r", encoding=args.encoding, newline="") as f:
        text = f.read()

    blob = compress_text(text)

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.output, "wb") as f:
        f.write(blob)

    freqs = build_frequencies(text)
    table_len = len(freqs)
    payload_len = len(blob) - HDR_SIZE - table_len * TBL_SIZE

    print(f"[encode] wrote {args.output}")
    print(f"[encode] symbols={len(text)}, distinct={table_len}")
    print(f"[encode] table_len={table_len}, payload_len={payload_len} bytes, total={len(blob)} bytes")

    if args.stats:
        codebook = build_codebook(build_tree(freqs))
        print(f"[encode] entropy={entropy(freqs):.4f} bits/sym, "
              f"avg_len={average_code_length(freqs, codebook):.4f} bits/sym, "
              f"ratio={compression_ratio(len(text), len(blob)):.4f}")

if __name__ == "__main__":
    main()
