"""
Classify raw patent name fields, one per line, and print one JSON record per line.

    python scripts/classify_names.py --input names.txt
    cat names.txt | python scripts/classify_names.py --log-level INFO
"""

import sys
import json
import logging
import argparse
from typing import Iterable, Iterator, Optional, TextIO

from patent_names.names import NameParser


def classify_lines(lines: Iterable[str], parser: Optional[NameParser] = None) -> Iterator[dict]:
    parser = parser or NameParser()
    for line in lines:
        raw_name = line.rstrip("\n")
        if not raw_name.strip():
            continue
        result = parser.parse(raw_name)
        if result.success and result.record is not None:
            yield {"input": raw_name, **result.record.to_dict()}
        else:
            yield {"input": raw_name, "error": result.error_message}


def main(argv: Optional[list] = None) -> int:
    arg_parser = argparse.ArgumentParser(description="Classify raw patent name fields as persons or organizations.")
    arg_parser.add_argument("--input", type=str, default=None, help="Path to a file of name fields (default: stdin).")
    arg_parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="INFO reports unmatched suffixes, DEBUG every suffix fix.",
    )
    args = arg_parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(message)s", stream=sys.stderr)

    source: TextIO
    if args.input:
        source = open(args.input, encoding="utf-8")
    else:
        source = sys.stdin

    failed = 0
    try:
        for row in classify_lines(source):
            if "error" in row:
                failed += 1
            print(json.dumps(row, ensure_ascii=False))
    finally:
        if source is not sys.stdin:
            source.close()

    if failed:
        logging.warning(f"{failed} name fields could not be classified")
    return 0


if __name__ == "__main__":
    sys.exit(main())
