"""Holiday definitions and observance calculations for a number of countries."""

__version__ = "2.0.0"

__all__ = [
    "holiday",
    "dk",
    "gb",
    "ie",
    "it",
    "lt",
    "nl",
    "no",
    "nz",
    "pl",
    "se",
    "si",
]