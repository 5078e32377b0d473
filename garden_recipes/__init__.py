"""
garden_recipes: beginner garden recipe recommender.

Picks a small, diverse, companion-compatible set of crop species from a
catalog for a grower's space, sun exposure and goal.
"""

__version__ = "0.1.0"
