"""Census statistics over a hierarchy of territorial units: loading, filtering, selection, sorting."""

__version__ = "0.1.0"

__all__ = [
    "criteria",
    "enums",
    "filters",
    "loader",
    "selection",
    "sorting",
    "table",
    "units",
]