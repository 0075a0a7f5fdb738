from typing import Any, Mapping

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
PRICE_UPPER_BOUND = 200


class IngredientFields(BaseModel):
    """The editable part of an ingredient and its constraints."""

    name: str = Field(..., min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    price: float = Field(..., gt=0, lt=PRICE_UPPER_BOUND)


class FieldViolation(BaseModel):
    field: str
    rule: str
    message: str


_price_adapter = TypeAdapter(float)


class IngredientForm:
    """
    Maps a submitted payload onto an Ingredient and checks the result.

    ``bind`` is the only method that mutates; ``validate`` is a pure check.
    """

    FIELDS = ("name", "price")

    def bind(self, payload: Mapping[str, Any], target: Any) -> Any:
        for field in self.FIELDS:
            if field not in payload:
                continue
            setattr(target, field, getattr(self, f"_clean_{field}")(payload[field]))
        return target

    def validate(self, record: Any) -> list[FieldViolation]:
        data = {field: getattr(record, field, None) for field in self.FIELDS}
        try:
            IngredientFields.model_validate(data)
        except ValidationError as ex:
            return [
                FieldViolation(
                    field=str(error["loc"][0]) if error["loc"] else "__all__",
                    rule=error["type"],
                    message=error["msg"],
                )
                for error in ex.errors()
            ]
        return []

    @staticmethod
    def _clean_name(value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @staticmethod
    def _clean_price(value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip().replace(",", ".")
            if not value:
                return None
        if value is None:
            return None
        try:
            return _price_adapter.validate_python(value)
        except ValidationError:
            # left as-is, validate() reports it
            return value
