# common/colors.py
from __future__ import annotations
from typing import Dict, Tuple

# Chart palette (histograms: home / away / total)
HOME_COLOR  = "#8884d8"
AWAY_COLOR  = "#82ca9d"
TOTAL_COLOR = "#ffc658"
OGIVE_COLOR = HOME_COLOR

# Pie segments keyed by result code
RESULT_COLORS: Dict[str, str] = {
    "H": HOME_COLOR,
    "D": AWAY_COLOR,
    "A": TOTAL_COLOR,
}


# -------------------- Simple color math --------------------
def hex_to_rgb01(hexs: str) -> Tuple[float, float, float]:
    h = hexs.strip().lstrip("#")
    return int(h[0:2], 16) / 255.0, int(h[2:4], 16) / 255.0, int(h[4:6], 16) / 255.0


def darken(hexs: str, factor: float = 0.25) -> str:
    """Scale each channel down by `factor` (0..1)."""
    r, g, b = hex_to_rgb01(hexs)
    r *= (1 - factor); g *= (1 - factor); b *= (1 - factor)
    return "#{:02X}{:02X}{:02X}".format(int(r * 255), int(g * 255), int(b * 255))
