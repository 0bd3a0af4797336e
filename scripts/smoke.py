# scripts/smoke.py
"""
Smoke Test Script for the Timeband renderer.

Usage
-----
1. Render a built-in sample timeline:
    $ python scripts/smoke.py

2. Render a local YAML timeline, optionally filtered by tag:
    $ python scripts/smoke.py --file tests/fixtures/rome.yml --filter rome
"""

import argparse
import logging
import sys
import traceback
from pathlib import Path

from timeband.core.contracts.entry import Entry
from timeband.core.errors import TimelineError
from timeband.core.filters import filter_entries
from timeband.core.render.text import render_text
from timeband.core.storage import dump_entry, load_entries

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

# --------------------------------------------------------------------------- #
# Test Data
# --------------------------------------------------------------------------- #
DEFAULT_ENTRIES = [
    Entry.point("Founding of Rome", "rome", -753),
    Entry.range("Roman Republic", "rome", -509, -27),
    Entry.point("Battle of Marathon", "greece", -490),
    Entry.range("Roman Empire", "rome", -27, 476),
    Entry.point("Fall of Constantinople", None, 1453),
]


def main() -> None:
    """Execute the smoke test workflow."""
    parser = argparse.ArgumentParser(description="Run Timeband Smoke Test")
    parser.add_argument("--file", "-f", type=str, help="Path to a YAML timeline")
    parser.add_argument("--filter", type=str, help="Keep only tags containing this text")
    args = parser.parse_args()

    # 1. Prepare Input Data
    if args.file:
        print(f"\n📂 Using timeline file: {args.file}")
        try:
            entries = load_entries(Path(args.file))
        except TimelineError as exc:
            print(f"❌ {exc}")
            return
    else:
        print("\n📝 Using default sample entries (No --file provided)")
        entries = DEFAULT_ENTRIES

    entries = filter_entries(entries, tag=args.filter)
    print(f"... {len(entries)} entries after filtering ...")
    for entry in entries[:3]:
        print(f"  {dump_entry(entry)}")

    # 2. Render Phase
    try:
        output = render_text(entries)
    except TimelineError as exc:
        print(f"\n❌ Render Failed: {exc}")
        traceback.print_exc()
        return

    print("\n" + "=" * 60)
    print("✅ Render Finished Successfully!")
    print("=" * 60 + "\n")
    print(output)


if __name__ == "__main__":
    main()
