#!/usr/bin/env python3
"""Flag one-way entries in the synonym table.

Lookups are bidirectional, so an asymmetric entry still matches in both
directions; this report exists so curators can see which links are only
declared on one side. It never fails the build.

Usage:
    python scripts/check_thesaurus.py
    python scripts/check_thesaurus.py --quiet   # counts only
"""

import argparse
import sys
from collections import defaultdict
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from resume_match.thesaurus import default_thesaurus


def print_header(title: str):
    """Print a formatted section header."""
    width = 80
    print("\n" + "=" * width)
    print(f" {title}")
    print("=" * width + "\n")


def main() -> int:
    parser = argparse.ArgumentParser(description="Report asymmetric synonym entries")
    parser.add_argument("--quiet", action="store_true", help="Print counts only")
    args = parser.parse_args()

    thesaurus = default_thesaurus()
    pairs = thesaurus.asymmetric_pairs()

    print_header("Synonym Table Symmetry")
    print(f"Entries:          {len(thesaurus)}")
    print(f"One-way links:    {len(pairs)}")

    if args.quiet or not pairs:
        return 0

    by_term = defaultdict(list)
    for term, synonym in pairs:
        by_term[term].append(synonym)

    print()
    for term in sorted(by_term):
        print(f"  {term!r} -> {', '.join(repr(s) for s in by_term[term])} (no link back)")

    return 0


if __name__ == "__main__":
    sys.exit(main())
