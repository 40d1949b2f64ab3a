"""Diagnostics package.

- benchmark, validate_csv: always available, standard library only
- cities, plot_day: optional (require the diagnostics extras)
"""

__all__ = ["benchmark", "validate_csv", "cities", "plot_day"]
