"""Number formatting for the derivation strings shown in reports."""

from __future__ import annotations


def num(value: float) -> str:
    """Shortest round-trip form, without a trailing ``.0`` on whole numbers."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def fixed(value: float) -> str:
    """Two-decimal form used for areas, heights and ratios."""
    return f"{value:.2f}"


def lines(*parts: str) -> str:
    """Join derivation lines and strip leading/trailing blank lines."""
    return "\n".join(parts).strip()
