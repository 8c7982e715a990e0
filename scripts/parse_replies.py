"""
Batch parse saved model replies and write normalized inventories.

Usage:
    python scripts/parse_replies.py [--input-dir data/replies/raw] [--output-dir data/replies/parsed]
"""

import argparse
import json
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from wildscan.analysis.pipeline import interpret_reply
from wildscan.logging_config import setup_logging_from_config


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--input-dir",
        default="data/replies/raw",
        help="Directory containing reply .txt files",
    )
    parser.add_argument(
        "--output-dir",
        default="data/replies/parsed",
        help="Output directory for normalized JSON",
    )
    parser.add_argument("--workers", type=int, default=4, help="Parallel workers")
    args = parser.parse_args()
    setup_logging_from_config()

    base_dir = Path(__file__).resolve().parent.parent
    input_dir = base_dir / args.input_dir
    output_dir = base_dir / args.output_dir

    if not input_dir.exists():
        print(f"Input directory not found: {input_dir}")
        return 1

    reply_files = sorted(input_dir.glob("*.txt"))
    if not reply_files:
        print(f"No reply files found in {input_dir}")
        return 0

    output_dir.mkdir(parents=True, exist_ok=True)
    texts = [p.read_text(encoding="utf-8") for p in reply_files]
    with ThreadPoolExecutor(max_workers=args.workers) as pool:
        outcomes = list(pool.map(interpret_reply, texts))

    failures = 0
    for path, outcome in zip(reply_files, outcomes):
        if not outcome.ok:
            failures += 1
            print(f"FAIL: {path.name} ({outcome.failure.value})")
            continue
        out_path = output_dir / f"{path.stem}.json"
        with open(out_path, "w", encoding="utf-8") as f:
            json.dump(outcome.result.to_dict(), f, indent=2, ensure_ascii=False)
        print(f"Parsed {path.name} -> {out_path.name} ({len(outcome.result.animals)} animals, {len(outcome.result.plants)} plants)")

    print(f"{len(reply_files) - failures}/{len(reply_files)} replies parsed.")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
