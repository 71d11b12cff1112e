"""quakedash package initializer.

This package contains the data side of the earthquake dashboard used by
the Shiny application.  Modules cover the feed loader, the magnitude
aggregation, the scatter/table projections, the dashboard state and the
plotting helpers.  See individual module docstrings for details.
"""
