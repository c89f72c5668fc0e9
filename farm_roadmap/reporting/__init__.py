"""
farm_roadmap.reporting — Response loading, report formatting and export.

This package sits outside the scoring engine: it reads response files,
renders engine output for the terminal, and writes report files.

Modules:
  reader     — JSON response file loading and validation.
  formatters — ASCII terminal formatters for Typer CLI commands.
  export     — JSON/CSV report writers.
"""
