import argparse
import logging
import os

import numpy as np

from .catalog import default_catalog
from .errors import EngineError
from .export import export_json, generate_readability_report, print_theme
from .palette import load_theme_json
from .resolve import random_dark, random_light, random_theme, search
from .zed import generate_zed_theme


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="tvibe",
        description="Pick a terminal/editor theme, complete its palette and export it",
        epilog=(
            "Examples:\n"
            "  tvibe -t gruvbox -o out/         # export the closest match to 'gruvbox'\n"
            "  tvibe -rd                        # show a random dark theme"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--theme", "-t",
        metavar="QUERY",
        help="Theme name (supports fuzzy matching)",
    )
    parser.add_argument(
        "--rand", "-r",
        action="store_true",
        help="Pick a random theme",
    )
    parser.add_argument(
        "--dark", "-d",
        action="store_true",
        help="With --rand or --theme-list, only dark themes",
    )
    parser.add_argument(
        "--light", "-l",
        action="store_true",
        help="With --rand or --theme-list, only light themes",
    )
    parser.add_argument(
        "--theme-list",
        action="store_true",
        help="List available themes",
    )
    parser.add_argument(
        "--from-file",
        metavar="JSON",
        help="Load a theme record from a JSON file instead of the catalog",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for --rand, for repeatable picks",
    )
    parser.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=None,
        help="Export palette JSON, readability report and Zed theme into DIR",
    )
    parser.add_argument(
        "--opacity",
        type=float,
        default=None,
        help="Also export a blur Zed theme with this opacity (0.0-1.0)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log derivation details",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.dark and args.light:
        parser.error("--dark and --light are mutually exclusive")
    if sum(bool(x) for x in (args.theme, args.rand, args.from_file)) > 1:
        parser.error("Use only one of --theme, --rand and --from-file")
    if args.opacity is not None and not args.output:
        parser.error("--opacity requires --output")

    catalog = default_catalog()

    if args.theme_list:
        if args.dark:
            names = catalog.dark_names
        elif args.light:
            names = catalog.light_names
        else:
            names = catalog.names
        for name in names:
            print(name)

    try:
        theme = _resolve(args, catalog)
        if theme is None:
            if not args.theme_list:
                parser.error("Either --theme, --rand, --from-file or --theme-list is required")
            return

        theme.prepare()
        theme.validate()

        if args.output:
            _export(theme, args.output, args.opacity)
        else:
            print_theme(theme)
    except (EngineError, OSError, ValueError) as e:
        parser.exit(1, f"tvibe: error: {e}\n")

    print(theme.name)


def _resolve(args, catalog):
    if args.theme:
        return search(args.theme, catalog)
    if args.from_file:
        return load_theme_json(args.from_file)
    if args.rand:
        rng = np.random.default_rng(args.seed)
        if args.dark:
            return random_dark(catalog, rng)
        if args.light:
            return random_light(catalog, rng)
        return random_theme(catalog, rng)
    return None


def _export(theme, output_dir, opacity):
    """Write all outputs for a prepared theme into ``output_dir``."""
    os.makedirs(output_dir, exist_ok=True)

    report, issues = generate_readability_report(theme)
    print("\n" + report)

    palette_json_path = os.path.join(output_dir, f"palette-{theme.variant}.json")
    report_path = os.path.join(output_dir, f"readability_report-{theme.variant}.txt")
    zed_path = os.path.join(output_dir, f"{theme.name}.json")
    zed_blur_path = os.path.join(output_dir, f"{theme.name}-blur.json")

    export_json(theme, palette_json_path)

    with open(report_path, "w") as f:
        f.write(report)

    with open(zed_path, "w") as f:
        f.write(generate_zed_theme(theme))

    if opacity is not None:
        with open(zed_blur_path, "w") as f:
            f.write(generate_zed_theme(theme, opacity=opacity))

    print("\n" + "=" * 60)
    print("Exported:")
    print(f"  - {palette_json_path}")
    print(f"  - {report_path}")
    print(f"  - {zed_path}")
    if opacity is not None:
        print(f"  - {zed_blur_path} (opacity {opacity:.2f})")
    print("=" * 60)


if __name__ == "__main__":
    main()
