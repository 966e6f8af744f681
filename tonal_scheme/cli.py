import argparse
import logging
import sys

from .color.conversion import COLOR_TAGS
from .color.formula import FORMULA_ANGLES
from .errors import TonalSchemeError
from .export import export_json, generate_contrast_report, print_colors
from .scheme import MODES, Scheme


def _custom_color(value):
    key, sep, color = value.partition("=")
    if not sep or not key or not color:
        raise argparse.ArgumentTypeError(f"expected KEY=COLOR, got {value!r}")
    return key, color


def build_parser():
    parser = argparse.ArgumentParser(
        description="Generate light and dark UI color roles from a seed color"
    )
    parser.add_argument("seed", help="Seed color, e.g. '#1677FF' or 'rgb(22, 119, 255)'")
    parser.add_argument(
        "--formula",
        choices=list(FORMULA_ANGLES),
        default="triadic",
        help="Hue formula for secondary/tertiary colors (default: triadic)",
    )
    parser.add_argument(
        "--angle",
        type=float,
        default=None,
        help="Hue offset in degrees (default: 60 triadic, 45 adjacent, 30 complementary)",
    )
    parser.add_argument(
        "--out-type",
        choices=COLOR_TAGS,
        default="hex",
        help="Output color form (default: hex)",
    )
    parser.add_argument(
        "--custom",
        metavar="KEY=COLOR",
        type=_custom_color,
        action="append",
        default=[],
        help="Custom color, overriding a base color or adding a new key (repeatable)",
    )
    parser.add_argument(
        "--mode",
        choices=[*MODES, "both"],
        default="both",
        help="Brightness mode(s) to output (default: both)",
    )
    parser.add_argument(
        "--level",
        choices=["AA", "AAA"],
        default="AA",
        help="Contrast level for text on role colors (default: AA)",
    )
    parser.add_argument("--json", action="store_true", help="Print the scheme as JSON")
    parser.add_argument("--report", action="store_true", help="Print a contrast report")
    parser.add_argument("--tonal", action="store_true", help="Also print tonal colors")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    modes = MODES if args.mode == "both" else (args.mode,)

    try:
        scheme = Scheme(
            args.seed,
            custom_colors=dict(args.custom),
            out_type=args.out_type,
            formula=args.formula,
            angle=args.angle,
            contrast_level=args.level,
        )
    except TonalSchemeError as e:
        logging.getLogger(__name__).debug(e.technical_message)
        print(f"error: {e.get_full_message()}", file=sys.stderr)
        return 2

    if args.json:
        print(export_json(scheme, modes=modes))
        return 0

    print("=" * 60)
    print(f"BASE COLORS (seed {args.seed})")
    print("=" * 60)
    print_colors(scheme.colors)

    for mode in modes:
        brightness = scheme.mode(mode)
        print("\n" + "=" * 60)
        print(f"{mode.upper()} ROLES")
        print("=" * 60)
        print_colors(brightness.roles)

        if args.tonal:
            print(f"\n{mode.upper()} TONAL")
            print("-" * 60)
            print_colors(brightness.tonal)

        if args.report:
            report, _ = generate_contrast_report(brightness.roles, args.level)
            print("\n" + report)

    return 0


if __name__ == "__main__":
    sys.exit(main())
