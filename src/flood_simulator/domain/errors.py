"""Error types raised by the flood risk core."""
from typing import Optional


class InvalidInput(ValueError):
    """An input lies outside its declared domain.

    Attributes
    ----------
    field : str, optional
        Name of the offending input (e.g. ``"region"``, ``"window_days"``).
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field
