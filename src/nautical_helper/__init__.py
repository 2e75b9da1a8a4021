"""Maritime navigation calculators and a two-operator watch scheduler."""

__version__ = "0.1.0"

__all__ = [
    "core",
    "formulas",
    "watch",
    "api",
    "cli",
]
