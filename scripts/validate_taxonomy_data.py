"""Validate flavor taxonomy consistency.

Checks, for every packaged taxonomy version:
1. Level3 keys are level2 subcategories and level4 keys are level3 notes.
2. Every subcategory has notes and every note has descriptors.
3. Korean labels only exist for terms on the wheel.
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
DATA_ROOT = SRC / "bean_match" / "taxonomy" / "data"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from bean_match.exceptions import TaxonomyError  # noqa: E402
from bean_match.taxonomy import FlavorTaxonomy  # noqa: E402


def fail(message: str) -> None:
    print(f"[taxonomy-check] ERROR: {message}")
    raise SystemExit(1)


def iter_taxonomy_versions() -> list[str]:
    versions = [
        path.name
        for path in sorted(DATA_ROOT.iterdir())
        if path.is_dir() and (path / "__init__.py").exists()
    ]
    if not versions:
        fail(f"No taxonomy versions found under {DATA_ROOT}")
    return versions


def main() -> int:
    for version in iter_taxonomy_versions():
        try:
            taxonomy = FlavorTaxonomy(version=version)
        except TaxonomyError as exc:
            fail(str(exc))
        problems = taxonomy.validate()
        if problems:
            fail(f"{version}: " + "; ".join(problems))
        print(f"[taxonomy-check] {version}: {len(taxonomy.all_terms())} terms")

    print("[taxonomy-check] OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
