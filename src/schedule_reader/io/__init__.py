"""Spreadsheet input and record delivery."""
