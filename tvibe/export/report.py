from ..color import Color, contrast_ratio
from ..palette import ANSI_NAMES

# Contrast requirements against the main background
MIN_TEXT_CONTRAST = 4.5  # Main foreground
MIN_DIM_CONTRAST = 3.0  # Comments and dim foregrounds
MIN_TERMINAL_CONTRAST = 3.0  # Terminal colors other than black


def _entries(theme):
    """(category, min contrast, [(key, hex)]) rows for a prepared theme."""
    colors = theme.colors
    fg = colors.foreground
    tiers = (("", colors.base), ("_bright", colors.bright), ("_dim", colors.dim))

    rows = [
        ("FOREGROUND (main)", MIN_TEXT_CONTRAST, [
            ("foreground_0", fg[0]),
            ("foreground_1", fg[1]),
            ("variable", colors.variable),
        ]),
        ("FOREGROUND (dim)", MIN_DIM_CONTRAST, [
            ("foreground_2", fg[2]),
            ("foreground_3", fg[3]),
            ("comment", colors.comment),
        ]),
    ]
    for suffix, tier in tiers:
        label = f"TERMINAL ({suffix.strip('_').title() or 'Base'})"
        keys = [(f"{name}{suffix}", getattr(tier, name))
                for name in ANSI_NAMES if name != "black"]
        rows.append((label, MIN_TERMINAL_CONTRAST, keys))
    return rows


def generate_readability_report(theme):
    """Generate a readability report for a prepared theme.

    Every foreground and terminal color is checked against background
    slot 1, the main editor background.

    Returns:
        tuple: (report text, list of (key, hex, achieved, required) issues)
    """
    bg = Color.from_hex(theme.require_prepared().colors.background[1])
    bg_lum = bg.luminance()

    report = []
    report.append("=" * 70)
    report.append("READABILITY REPORT")
    report.append("=" * 70)
    report.append(f"Theme: {theme.name} ({theme.variant.upper()})")
    _, s, v = bg.to_hsv()
    report.append(f"Background:       {bg} (V: {v:.1f}%, S: {s:.1f}%)")

    issues = []

    for cat_name, min_contrast, keys in _entries(theme):
        report.append(f"\n{cat_name} (min: {min_contrast}:1)")
        report.append("-" * 50)
        for key, hex_val in keys:
            cr = contrast_ratio(Color.from_hex(hex_val).luminance(), bg_lum)

            status = "✓" if cr >= min_contrast else "✗ FAIL"
            if cr < min_contrast:
                issues.append((key, hex_val, cr, min_contrast))

            report.append(f"  {key:16} {hex_val}  vs bg: {cr:4.1f}:1  {status}")

    report.append("\n" + "=" * 70)
    if issues:
        report.append(f"ISSUES FOUND: {len(issues)}")
        for key, hex_val, achieved, required in issues:
            report.append(
                f"  - {key}: {hex_val} has {achieved:.1f}:1, needs {required}:1"
            )
    else:
        report.append("ALL COLORS PASS CONTRAST REQUIREMENTS ✓")
    report.append("=" * 70)

    return "\n".join(report), issues


def print_theme(theme):
    """Print palette info"""
    colors = theme.require_prepared().colors

    print("\n" + "=" * 60)
    print(f"{theme.name} ({theme.variant.upper()} THEME)")
    print("=" * 60)

    categories = [
        ("BACKGROUNDS", [(f"background_{i}", c) for i, c in enumerate(colors.background.colors)]),
        ("FOREGROUNDS", [(f"foreground_{i}", c) for i, c in enumerate(colors.foreground.colors)]),
        ("SELECTION", [(f"selection_{i}", c) for i, c in enumerate(colors.selection.colors)]),
        ("SYNTAX", [
            ("comment", colors.comment),
            ("variable", colors.variable),
            ("status_line", colors.status_line),
        ]),
        ("DIFF", [(f"diff_{k}", v) for k, v in colors.diff.to_dict().items()]),
        ("TERMINAL (Base)", [(n, colors.base.channel(n)) for n in ANSI_NAMES]),
        ("TERMINAL (Bright)", [(f"{n}_bright", colors.bright.channel(n)) for n in ANSI_NAMES]),
        ("TERMINAL (Dim)", [(f"{n}_dim", colors.dim.channel(n)) for n in ANSI_NAMES]),
    ]

    bg_lum = Color.from_hex(colors.background[1]).luminance()
    for cat_name, keys in categories:
        print(f"\n{cat_name}:")
        for key, hex_val in keys:
            contrast = contrast_ratio(Color.from_hex(hex_val).luminance(), bg_lum)
            print(f"  {key:18} {hex_val}  (contrast: {contrast:.1f}:1)")
