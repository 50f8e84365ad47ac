"""
1) Read a saved service response (JSON) from disk.
2) Build the person profile(s) it contains.
3) Pretty-print each profile and summarize its birth and death.
4) Optionally link the profiles into an ancestor tree, validate it and chart it.
"""

import argparse
import json
import logging
from pathlib import Path

from config import Settings
from dates import cleanup_date, format_optional_date
from graph import build_ancestor_tree
from models import ProfileProvenance
from parsing import build_profiles
from plotting import plot_ancestors
from printing import pretty_format
from validation import validate_ancestor_tree


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Materialize person profiles from a saved response")
    parser.add_argument("response", type=Path, help="JSON file holding the service response")
    parser.add_argument(
        "--path",
        default="",
        help="dot-separated keys leading from each response item to its profile (e.g. 'person')",
    )
    parser.add_argument(
        "--provenance",
        choices=[p.name.lower() for p in ProfileProvenance],
        default="primary_person",
        help="kind of request that produced the response",
    )
    parser.add_argument(
        "--ancestors",
        action="store_true",
        help="treat the profiles as a flat ancestor list and link them into a tree",
    )
    parser.add_argument("--chart", type=Path, help="write the ancestor chart here (png, svg, pdf, dot)")
    parser.add_argument(
        "--show-provenance", action="store_true", help="prefix printed profiles with their provenance"
    )
    return parser.parse_args(argv)


def _life_date(value, settings: Settings) -> str:
    cleaned = cleanup_date(value)
    return format_optional_date(cleaned, settings.long_month_names, settings.in_on) or cleaned


def describe_life(profile, settings: Settings) -> str:
    born = _life_date(profile.birth_date if profile.has_birth_date() else None, settings)
    if profile.is_living:
        return f"{profile.long_name} was born {born}"
    died = _life_date(profile.death_date if profile.has_death_date() else None, settings)
    return f"{profile.long_name} was born {born} and died {died}"


def main(argv=None) -> int:
    args = parse_args(argv)
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    print(f"Reading response: {args.response}")
    response = json.loads(args.response.read_text(encoding="utf-8"))
    items = response if isinstance(response, list) else [response]

    provenance = ProfileProvenance[args.provenance.upper()]
    path = [key for key in args.path.split(".") if key]

    print("Building profiles...")
    profiles = build_profiles(items, provenance, *path)
    print(f"  Found {len(profiles)} profiles")

    for profile in profiles:
        print(
            pretty_format(
                profile,
                show_provenance=args.show_provenance,
                indent_string=settings.indent_string,
            ),
            end="",
        )
        print(describe_life(profile, settings))

    if args.ancestors and profiles:
        print("Linking ancestors...")
        tree = build_ancestor_tree(profiles, profiles[0])
        print(f"  Tree has {len(tree)} people")

        print("Validating tree...")
        warnings = validate_ancestor_tree(tree)
        if warnings:
            print(f"  Found {len(warnings)} validation warnings:")
            for w in warnings[:10]:  # Show first 10 warnings
                print(f"    - {w}")
            if len(warnings) > 10:
                print(f"    ... and {len(warnings) - 10} more")
        else:
            print("  No validation issues found")

        if args.chart:
            plot_ancestors(tree, args.chart)

    print("Done!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
