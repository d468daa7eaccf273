"""Command-line interface for bean-match."""

import argparse
import json
import sys

from pydantic import ValidationError

from bean_match import __version__
from bean_match.exceptions import BeanMatchError
from bean_match.matching import MatchingConfig, MatchingEngine
from bean_match.schema import MatchDetails, MatchScore, SelectedFlavors, SensoryAttributes


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="bean-match",
        description="Score a coffee tasting against the roaster's notes",
    )
    parser.add_argument("notes", help="Roaster tasting notes (quote the whole text)")
    for level in range(1, 5):
        parser.add_argument(
            f"--level{level}",
            action="append",
            default=[],
            metavar="FLAVOR",
            help=f"Flavor selected on wheel level {level} (repeatable)",
        )
    for attribute in ("body", "acidity", "sweetness", "finish"):
        parser.add_argument(
            f"--{attribute}",
            type=int,
            default=3,
            help=f"{attribute.capitalize()} rating 1-5 (default: 3)",
        )
    parser.add_argument(
        "--mouthfeel",
        default="Clean",
        choices=["Clean", "Creamy", "Juicy", "Silky"],
        help="Mouthfeel (default: Clean)",
    )
    parser.add_argument(
        "--details",
        action="store_true",
        help="Include matched flavors, sensory cues and suggestions",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "--taxonomy-version",
        default="v1",
        help="Flavor wheel version (default: v1)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"bean-match {__version__}",
    )

    args = parser.parse_args(argv)

    try:
        engine = MatchingEngine(config=MatchingConfig(taxonomy_version=args.taxonomy_version))
        selected = SelectedFlavors(
            level1=args.level1,
            level2=args.level2,
            level3=args.level3,
            level4=args.level4,
        )
        sensory = SensoryAttributes(
            body=args.body,
            acidity=args.acidity,
            sweetness=args.sweetness,
            finish=args.finish,
            mouthfeel=args.mouthfeel,
        )
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except BeanMatchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    score = engine.calculate_match_score(args.notes, selected, sensory)
    details = engine.get_match_details(args.notes, selected, sensory) if args.details else None
    high_match = score.is_high_match(engine.config.high_match_threshold)

    if args.json:
        payload = score.model_dump(by_alias=True)
        payload["highMatch"] = high_match
        if details is not None:
            payload["details"] = details.model_dump(by_alias=True)
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        _print_formatted(score, details, high_match)

    return 0


def _print_formatted(score: MatchScore, details: MatchDetails | None, high_match: bool) -> None:
    """Print result in human-readable format."""
    print()
    print("  bean-match")
    print()

    fields = [
        ("Total", f"{score.total}%" + ("  (great match!)" if high_match else "")),
        ("Flavor", f"{score.flavor_score}%"),
        ("Sensory", f"{score.sensory_score}%"),
    ]
    if details is not None:
        fields.extend(
            [
                ("Matched", _format_list(details.matched_flavors)),
                ("Unmatched", _format_list(details.unmatched_flavors)),
                ("Sensory Cues", _format_list(details.sensory_matches)),
                ("Suggestions", _format_list(details.suggestions)),
            ]
        )

    for label, value in fields:
        display = value if value else "-"
        print(f"  {label + ':':<14} {display}")

    print()


def _format_list(items: list[str]) -> str | None:
    """Format list as comma-separated string."""
    if not items:
        return None
    return ", ".join(items)


if __name__ == "__main__":
    sys.exit(main())
