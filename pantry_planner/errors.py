from __future__ import annotations


class PlannerError(Exception):
    """Base class for recipe planner failures."""


class PantryRequiredError(PlannerError, ValueError):
    """Raised when a planner is built with neither a user nor a transient pantry."""


class PantryNotResolvedError(PlannerError, RuntimeError):
    """Raised when an operation needs pantry contents but none could be resolved."""


class RecipeSearchError(PlannerError):
    """Raised when the recipe search service returns a body we cannot read."""
