#!/usr/bin/env python3
"""
Print the text from an hOCR file, one line of text per hOCR line.

Usage:
    python hocr_to_txt.py page.hocr
"""

import argparse
import sys
from typing import List, Optional

from hocrtools.core import HocrError, document_text, parse_file


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Print the text from an hOCR file")
    parser.add_argument("hocr", help="hOCR file")
    args = parser.parse_args(argv)

    try:
        doc = parse_file(args.hocr)
    except (HocrError, OSError) as e:
        print(f"[Error] {args.hocr}: {e}", file=sys.stderr)
        sys.exit(1)

    print(document_text(doc))


if __name__ == "__main__":
    main()
