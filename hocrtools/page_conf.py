#!/usr/bin/env python3
"""
Print the total confidence for a page of hOCR, as the average of the
confidence of each word, rounded to a whole percentage.

Usage:
    python page_conf.py page.hocr
"""

import argparse
import sys
from typing import List, Optional

from hocrtools.core import HocrError, document_confidence, parse_file


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description="Print the total confidence for a page, as an average of the confidence of each word"
    )
    parser.add_argument("hocr", help="hOCR file")
    args = parser.parse_args(argv)

    try:
        avg = document_confidence(parse_file(args.hocr))
    except (HocrError, OSError) as e:
        print(f"[Error] Retrieving confidence for {args.hocr}: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"{avg:0.0f}")


if __name__ == "__main__":
    main()
