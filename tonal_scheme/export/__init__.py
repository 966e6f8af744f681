from .json_export import export_json, rgb_channels, scheme_to_dict
from .report import generate_contrast_report, print_colors

__all__ = [
    "export_json",
    "generate_contrast_report",
    "print_colors",
    "rgb_channels",
    "scheme_to_dict",
]
