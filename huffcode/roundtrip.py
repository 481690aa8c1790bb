import argparse
import logging
import os
from codec import encode, decode_text
from huffman import build_codebook, build_frequencies, build_tree, check_tree

def main():
    """
    Single run: text -> raw payload file -> text, decoding with the same
    in-memory tree. The payload file carries no tree, so it can only be
    decoded inside this run.
    """
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", default="input.txt", help="path to input text file")
    ap.add_argument("--compressed", default="output.bin", help="path to raw payload file")
    ap.add_argument("--output", default="output.txt", help="path to decoded text file")
    ap.add_argument("--encoding", default="utf-8", help="text encoding (default utf-8)")
    ap.add_argument("--lenient", action="store_true", help="drop an unfinished trailing code instead of failing")
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    args = ap.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    with open(args.input, "r", encoding=args.encoding, newline="") as f:
        text = f.read()

    tree = build_tree(build_frequencies(text))
    check_tree(tree)
    payload, nbits = encode(text, build_codebook(tree))

    for path in (args.compressed, args.output):
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(args.compressed, "wb") as f:
        f.write(payload)
    print(f"[roundtrip] wrote {args.compressed} nbits={nbits} bytes={len(payload)}")

    with open(args.compressed, "rb") as f:
        payload = f.read()
    decoded = decode_text(payload, nbits, tree, strict=not args.lenient)

    with open(args.output, "w", encoding=args.encoding, newline="") as f:
        f.write(decoded)
    print(f"[roundtrip] wrote {args.output} symbols={len(decoded)} match={decoded == text}")

if __name__ == "__main__":
    main()
