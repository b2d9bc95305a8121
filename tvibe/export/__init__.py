from .json_export import export_json, flatten_palette
from .report import generate_readability_report, print_theme

__all__ = [
    "export_json",
    "flatten_palette",
    "generate_readability_report",
    "print_theme",
]
