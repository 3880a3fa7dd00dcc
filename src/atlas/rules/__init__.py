"""Smart rules — explainable heuristics over uploaded layers.

Both rules are pure: they take layers and return report text. The panel
is the only stateful piece, and its state is just the layer selection.
"""

from atlas.rules.changes import ChangeReport, FieldChange, compare_layers, detect_changes
from atlas.rules.land_use import LandUseSummary, summarize, tally_land_use
from atlas.rules.panel import SmartHelpPanel

__all__ = [
    "ChangeReport",
    "FieldChange",
    "LandUseSummary",
    "SmartHelpPanel",
    "compare_layers",
    "detect_changes",
    "summarize",
    "tally_land_use",
]
