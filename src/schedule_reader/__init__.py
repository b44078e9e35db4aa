"""Extract employee work schedules from spreadsheet grids."""

__version__ = "0.1.0"
