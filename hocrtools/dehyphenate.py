#!/usr/bin/env python3
"""
Basic dehyphenation of plain text or hOCR files.

Words broken across lines with a trailing hyphen are joined onto the first
line. With --hocr the hOCR tree is dehyphenated at word level and its text
is written out; words recognised character by character are not joined.

Usage:
    python dehyphenate.py in.txt out.txt
    python dehyphenate.py --hocr page.hocr out.txt
"""

import argparse
import sys
from typing import List, Optional

from hocrtools.core import (
    HocrError, dehyphenate_lines, dehyphenate_text, document_text, parse
)


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Dehyphenate a file")
    parser.add_argument("input", help="File to read")
    parser.add_argument("output", help="File to write the dehyphenated text to")
    parser.add_argument("--hocr", action="store_true",
                        help="Process hOCR files, rather than plain text")
    args = parser.parse_args(argv)

    try:
        with open(args.input, "rb") as f:
            data = f.read()
    except OSError as e:
        print(f"[Error] Reading {args.input}: {e}", file=sys.stderr)
        sys.exit(1)

    if args.hocr:
        try:
            doc = parse(data)
        except HocrError as e:
            print(f"[Error] {args.input}: {e}", file=sys.stderr)
            sys.exit(1)
        for line_id in dehyphenate_lines(doc.lines):
            print(f"[Warning] Line {line_id}: character-level hyphenation not handled",
                  file=sys.stderr)
        text = document_text(doc)
    else:
        text = dehyphenate_text(data.decode("utf-8"))

    with open(args.output, "w", encoding="utf-8") as f:
        f.write(text)


if __name__ == "__main__":
    main()
