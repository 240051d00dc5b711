"""Unit selection helpers."""


def units_code(units: str) -> str:
    """G-code word selecting inch (G20) or millimeter (G21) mode."""
    return "G20" if units == 'inch' else "G21"


def unit_label(units: str) -> str:
    """Short label used in comments and prompts."""
    return "in" if units == 'inch' else "mm"
