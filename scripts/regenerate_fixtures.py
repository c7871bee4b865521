#!/usr/bin/env python3
"""
Regenerate scenario fixtures from the current editable implementation.

Usage:
    python scripts/regenerate_fixtures.py [fixture_name]

If fixture_name is provided, only that fixture is regenerated.
Otherwise, all fixtures are regenerated.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

# Add parent and test/ to path
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / "test"))

from scenarios import run_scenario


FIXTURES_DIR = Path(__file__).parent.parent / "test" / "fixtures"


def regenerate_fixture(fixture_dir: Path) -> None:
    """Regenerate a scenario fixture (input.json -> expected.json)."""
    if not (fixture_dir / "input.json").exists():
        print(f"  Skipping {fixture_dir.name}: no input.json")
        return

    result = run_scenario(fixture_dir)
    (fixture_dir / "expected.json").write_text(json.dumps(result, indent=2) + "\n")

    print(f"  {fixture_dir.name}: {result['state']}, dirty={result['dirty']}")


def main() -> int:
    """Main entry point."""
    target = sys.argv[1] if len(sys.argv) > 1 else None

    print("Regenerating fixtures...")

    for fixture_dir in sorted(FIXTURES_DIR.iterdir()):
        if not fixture_dir.is_dir():
            continue

        if target and fixture_dir.name != target:
            continue

        regenerate_fixture(fixture_dir)

    print("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
