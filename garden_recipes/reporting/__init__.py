"""
garden_recipes.reporting: ASCII formatting for CLI display.

Modules:
  formatters: terminal table formatters for Typer CLI commands.
"""
