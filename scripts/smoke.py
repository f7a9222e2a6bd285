# scripts/smoke.py
"""
Smoke Test Script for the fallible chapters.

Usage
-----
1. Run every chapter on the built-in samples:
    $ uv run python scripts/smoke.py

2. Run the meaning-of-life chapter on a local JSON file:
    $ uv run python scripts/smoke.py --file samples/doc.json

Nothing here unwraps unguarded, so the script never panics; the fatal paths are
exercised by the test suite instead.
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from fallible.chapters import (
    divide_safely,
    get_meaning_of_life,
    parse_input_to_json_value,
    try_get_meaning_of_life,
)

# --------------------------------------------------------------------------- #
# Environment Setup
# --------------------------------------------------------------------------- #
env_path = Path(".env")
if env_path.exists():
    load_dotenv(env_path)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
log = logging.getLogger("smoke")

# --------------------------------------------------------------------------- #
# Test Data
# --------------------------------------------------------------------------- #
DIVISIONS = [(4, 2), (8, 3), (-7, 2), (4, 0)]
DOCUMENTS = ["42", "'asdf'", '{"meaningOfLife": 42}', '{"meaningOfLife": "42"}', "{}"]


def main() -> None:
    """Execute the smoke test workflow."""
    parser = argparse.ArgumentParser(description="Run fallible smoke test")
    parser.add_argument("--file", "-f", type=str, help="Path to a JSON document")
    args = parser.parse_args()

    documents = list(DOCUMENTS)
    if args.file:
        input_path = Path(args.file)
        if not input_path.exists():
            log.error("File not found: %s", input_path)
            sys.exit(1)
        documents = [input_path.read_text(encoding="utf-8")]

    # 1. Division
    for a, b in DIVISIONS:
        log.info("divide_safely(%d, %d) = %r", a, b, divide_safely(a, b))

    # 2. Parsing and extraction
    for doc in documents:
        log.info("parse_input_to_json_value(%s) = %r", doc, parse_input_to_json_value(doc))
        checked = try_get_meaning_of_life(doc)
        log.info("try_get_meaning_of_life(%s) = %r", doc, checked)
        # The unguarded variant is safe once the checked one succeeded or failed to parse.
        if checked.is_success() or parse_input_to_json_value(doc).is_failure():
            log.info("get_meaning_of_life(%s) = %r", doc, get_meaning_of_life(doc))


if __name__ == "__main__":
    main()
