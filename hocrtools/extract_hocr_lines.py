#!/usr/bin/env python3
"""
Extract Line-Level Training Data from hOCR Files

Copies the text and corresponding image section for each line of an hOCR
file into separate files, which is useful for OCR training:
  - <name>_<line id>.png + <name>_<line id>.txt

Lines without an image (missing page image, bad geometry) or without text
are skipped.

Usage:
    python extract_hocr_lines.py page1.hocr page2.hocr -d lines/
    python extract_hocr_lines.py -b *.hocr --config extract.yaml
"""

import argparse
import sys
import warnings
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from hocrtools.core import (
    ExtractionConfig, ImageUnreadableWarning, MalformedDocument,
    get_line_details, load_config, save_line, sibling_image_path
)

# Unreadable images are reported per file below
warnings.filterwarnings("ignore", category=ImageUnreadableWarning)


def extract_file(hocr_path: str, config: ExtractionConfig) -> int:
    """
    Extract and save the lines of one hOCR file.

    Returns:
        Number of lines saved
    """
    image_path = None
    if config.use_base_path:
        image_path = sibling_image_path(hocr_path, config.image_suffix)

    result = get_line_details(hocr_path, image_path)
    for issue in result.issues:
        tqdm.write(f"[Warning] {hocr_path}: {issue}", file=sys.stderr)

    saved = 0
    for line in result:
        if not line.has_image:
            continue
        if config.skip_empty_text and line.text == "":
            continue
        save_line(line, Path(config.output_dir))
        saved += 1

    return saved


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description="Copy the text and image of each line of hOCR files into separate files"
    )
    parser.add_argument("files", nargs="+",
                        help="hOCR files to extract lines from")
    parser.add_argument("-b", "--use-base-path", action="store_true",
                        help="Use the .hocr path with its suffix replaced by the image suffix, "
                             "rather than the image path embedded in the .hocr")
    parser.add_argument("-d", "--dir", type=str, default=".",
                        help="Directory to save lines in (default: .)")
    parser.add_argument("--image-suffix", type=str, default=".png",
                        help="Image suffix used with -b (default: .png)")
    parser.add_argument("--keep-empty", action="store_true",
                        help="Also save lines with no text")

    # Config file (overrides command line)
    parser.add_argument("--config", type=str, default=None,
                        help="Path to YAML config file")

    args = parser.parse_args(argv)

    config = ExtractionConfig(
        output_dir=args.dir,
        use_base_path=args.use_base_path,
        image_suffix=args.image_suffix,
        skip_empty_text=not args.keep_empty
    )
    config = load_config(args.config, config)

    total = 0
    for hocr_path in tqdm(args.files, desc="Extracting lines", disable=len(args.files) < 2):
        try:
            total += extract_file(hocr_path, config)
        except MalformedDocument as e:
            tqdm.write(f"[Error] {hocr_path}: {e}", file=sys.stderr)
            sys.exit(1)
        except OSError as e:
            tqdm.write(f"[Warning] Skipping {hocr_path}: {e}", file=sys.stderr)

    print(f"[Extract] Saved {total} lines to {config.output_dir}")


if __name__ == "__main__":
    main()
