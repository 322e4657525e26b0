"""Blueprint exports."""

from . import home, purchase, sales

__all__ = [
    "home",
    "purchase",
    "sales",
]
