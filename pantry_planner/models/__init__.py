from .base import Base
from .ingredient import IngredientRecord
from .pantry import PantryItem
from .user import User

__all__ = [
    "Base",
    "User",
    "IngredientRecord",
    "PantryItem",
]
