"""pagesmith — content document engine for self-editable single-page sites."""

__version__ = "0.1.0"
