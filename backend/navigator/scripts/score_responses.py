"""
Score a saved set of questionnaire responses without touching the database.

Usage (from backend/):
  python -m navigator.scripts.score_responses responses.json
  cat responses.json | python -m navigator.scripts.score_responses -
"""
from __future__ import annotations

import json
import sys
from typing import List, Optional

from navigator.components.scoring.service import calculate_scores


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage: python -m navigator.scripts.score_responses <responses.json|->", file=sys.stderr)
        return 1

    source = args[0]
    try:
        if source == "-":
            payload = json.load(sys.stdin)
        else:
            with open(source, encoding="utf-8") as fh:
                payload = json.load(fh)
    except OSError as exc:
        print(f"Cannot read {source}: {exc}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as exc:
        print(f"Invalid JSON in {source}: {exc}", file=sys.stderr)
        return 2

    # Accept either a bare response map or a stored submission {"responses": {...}}
    if isinstance(payload, dict) and isinstance(payload.get("responses"), dict):
        payload = payload["responses"]

    result = calculate_scores(payload)
    print(json.dumps(result.model_dump(mode="json"), indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
