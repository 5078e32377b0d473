"""
garden_recipes.catalog: species catalog adapter.

Modules:
  loader: JSON export reader, validation and name lookup.
"""
