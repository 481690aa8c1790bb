import argparse
import logging
import os
from codec import decompress_text

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="path to .huf archive")
    ap.add_argument("--output", required=True, help="path to output text file")
    ap.add_argument("--encoding", default="utf-8", help="text encoding of output (default utf-8)")
    ap.add_argument("--lenient", action="store_true", help="drop an unfinished trailing code instead of failing")
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    args = ap.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    with open(args.input, "rb") as f:
        blob = f.read()

    text = decompress_text(blob, strict=not args.lenient)

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.output, "w", encoding=args.encoding, newline="") as f:
        f.write(text)
    print(f"[decode] wrote {args.output} symbols={len(text)}")

if __name__ == "__main__":
    main()
