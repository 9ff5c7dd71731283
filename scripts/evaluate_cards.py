# scripts/evaluate_cards.py
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from handclass.engine import evaluate_hand, result_to_dict
from handclass.helpers import CardError


def _jwrite(obj: Dict[str, Any], indent: Optional[int]) -> None:
    sys.stdout.write(json.dumps(obj, indent=indent) + "\n")
    sys.stdout.flush()


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Classify every 5-card combination of the given cards.")
    ap.add_argument("cards", nargs="+", help='card tokens such as "As Kd Th 9c 2s"')
    ap.add_argument("--no-strict", action="store_true", help="report every matching category")
    ap.add_argument("--indent", type=int, default=2)
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        result = evaluate_hand(args.cards, strict=not args.no_strict)
    except CardError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    _jwrite(result_to_dict(result), args.indent)
    return 0


if __name__ == "__main__":
    sys.exit(main())
