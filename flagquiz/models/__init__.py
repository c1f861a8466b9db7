from flagquiz.models.country import CountryPool, flag_label
from flagquiz.models.flag import FlagDesign, Orientation, design_for

__all__ = [
    "CountryPool", "flag_label",
    "FlagDesign", "Orientation", "design_for",
]
