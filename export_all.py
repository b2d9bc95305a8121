#!/usr/bin/env python3
"""
Export every catalog theme.
Consolidates Zed themes into out/themes/ folder.
"""

import argparse
import shutil
import subprocess
from pathlib import Path

from tvibe.catalog import default_catalog


def main():
    parser = argparse.ArgumentParser(
        description="Export every catalog theme and collect the Zed themes"
    )
    parser.add_argument(
        "--opacity",
        type=float,
        default=None,
        help="Also export blur themes with this opacity (0.0-1.0)",
    )
    parser.add_argument(
        "--dark", "-d",
        action="store_true",
        help="Only dark themes",
    )
    parser.add_argument(
        "--light", "-l",
        action="store_true",
        help="Only light themes",
    )
    args = parser.parse_args()

    root = Path(__file__).parent
    out_dir = root / "out"
    themes_dir = out_dir / "themes"

    themes_dir.mkdir(parents=True, exist_ok=True)

    catalog = default_catalog()
    if args.dark:
        names = catalog.dark_names
    elif args.light:
        names = catalog.light_names
    else:
        names = catalog.names

    print(f"Found {len(names)} themes to export\n")

    failed = []
    for theme_name in names:
        theme_out_dir = out_dir / theme_name

        print(f"{'=' * 60}")
        print(f"Exporting: {theme_name}")
        print(f"{'=' * 60}")

        cmd = ["uv", "run", "tvibe", "-t", theme_name, "-o", str(theme_out_dir)]
        if args.opacity is not None:
            cmd.extend(["--opacity", str(args.opacity)])

        result = subprocess.run(cmd, cwd=root)

        if result.returncode != 0:
            print(f"Error exporting {theme_name}")
            failed.append(theme_name)
            continue

        _copy_themes(theme_out_dir, theme_name, themes_dir)
        print()

    print(f"{'=' * 60}")
    print("Done! All themes consolidated in:")
    print(f"  {themes_dir}")
    if failed:
        print(f"Failed: {', '.join(failed)}")
    print(f"{'=' * 60}")


def _copy_themes(theme_out_dir, theme_name, themes_dir):
    """Copy generated Zed theme files to the consolidated themes directory."""
    for filename in (f"{theme_name}.json", f"{theme_name}-blur.json"):
        theme_file = theme_out_dir / filename
        if theme_file.exists():
            shutil.copy(theme_file, themes_dir / theme_file.name)
            print(f"Copied {theme_file.name} to {themes_dir}")


if __name__ == "__main__":
    main()
