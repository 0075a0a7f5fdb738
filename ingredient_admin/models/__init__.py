from .base import Base
from .ingredient import Ingredient

__all__ = [
    "Base",
    "Ingredient",
]
