from .ingredient import FieldViolation, IngredientFields, IngredientForm

__all__ = [
    "FieldViolation",
    "IngredientFields",
    "IngredientForm",
]
