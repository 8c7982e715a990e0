"""
Analyze image files with Gemini and print the species inventory.

Usage:
    python scripts/analyze_image.py photo.jpg [more.png ...] [--raw]
"""

import argparse
import json
import mimetypes
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from wildscan.analysis.pipeline import analyze_image
from wildscan.logging_config import setup_logging_from_config


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("images", nargs="+", help="Image files to analyze")
    parser.add_argument("--raw", action="store_true", help="Also print the raw model reply")
    args = parser.parse_args()
    setup_logging_from_config()

    status = 0
    for image in args.images:
        path = Path(image)
        if not path.exists():
            print(f"Image not found: {path}")
            status = 1
            continue
        mime_type = mimetypes.guess_type(path.name)[0] or "image/jpeg"
        outcome = analyze_image(path.read_bytes(), mime_type)
        print(f"== {path.name}")
        if args.raw and outcome.raw_reply:
            print(outcome.raw_reply)
        if outcome.ok:
            print(json.dumps(outcome.result.to_dict(), indent=2, ensure_ascii=False))
        else:
            print(f"Error: {outcome.failure.message}")
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
