"""
Ingredient workflow: list, create, edit and delete.

Each operation takes its collaborators as arguments and returns an outcome
describing what the HTTP layer should do next. Nothing here knows about
requests, responses or sessions.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from ingredient_admin.core.notifications import Notification, NotificationCategory
from ingredient_admin.core.pagination import PageResult, paginate
from ingredient_admin.models import Ingredient
from ingredient_admin.repositories.ingredient_repository import IngredientRepository
from ingredient_admin.schemas import FieldViolation, IngredientForm

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
INDEX_ROUTE = "ingredient_index"

MESSAGE_CREATED = "Votre ingrédient a été créé avec succès."
MESSAGE_UPDATED = "Votre ingrédient a été modifié avec succès."
MESSAGE_DELETED = "Votre ingrédient a été supprimé avec succès."
MESSAGE_NOT_FOUND = "L'ingrédient demandé n'existe pas."


@dataclass
class ListOutcome:
    page: PageResult[Ingredient]


@dataclass
class FormOutcome:
    ingredient: Ingredient
    submitted: bool = False
    violations: list[FieldViolation] = field(default_factory=list)

    def errors_for(self, field_name: str) -> list[FieldViolation]:
        return [v for v in self.violations if v.field == field_name]


@dataclass
class RedirectOutcome:
    route_name: str
    notification: Notification | None = None


def _not_found(ingredient_id: int) -> RedirectOutcome:
    logger.warning(f"Ingredient {ingredient_id} not found")
    return RedirectOutcome(
        route_name=INDEX_ROUTE,
        notification=Notification(category=NotificationCategory.NOT_FOUND, message=MESSAGE_NOT_FOUND),
    )


def _success(message: str) -> RedirectOutcome:
    return RedirectOutcome(
        route_name=INDEX_ROUTE,
        notification=Notification(category=NotificationCategory.SUCCESS, message=message),
    )


async def list_ingredients(
    repository: IngredientRepository, *, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE
) -> ListOutcome:
    ingredients = await repository.find_all()
    return ListOutcome(page=paginate(ingredients, page, page_size))


async def _submit(
    repository: IngredientRepository,
    form: IngredientForm,
    ingredient: Ingredient,
    payload: Mapping[str, Any] | None,
    success_message: str,
) -> FormOutcome | RedirectOutcome:
    if payload is None:
        return FormOutcome(ingredient=ingredient)

    form.bind(payload, ingredient)
    violations = form.validate(ingredient)
    if violations:
        logger.info(f"Ingredient form rejected on: {', '.join(sorted({v.field for v in violations}))}")
        return FormOutcome(ingredient=ingredient, submitted=True, violations=violations)

    await repository.save(ingredient)
    logger.info(f"Ingredient {ingredient.id} saved")
    return _success(success_message)


async def create_ingredient(
    repository: IngredientRepository,
    form: IngredientForm,
    *,
    payload: Mapping[str, Any] | None = None,
) -> FormOutcome | RedirectOutcome:
    """
    Show an empty form (``payload`` is None) or handle a submitted one.

    Only a valid submission touches the repository.
    """
    return await _submit(repository, form, Ingredient(), payload, MESSAGE_CREATED)


async def edit_ingredient(
    repository: IngredientRepository,
    form: IngredientForm,
    *,
    ingredient_id: int,
    payload: Mapping[str, Any] | None = None,
) -> FormOutcome | RedirectOutcome:
    ingredient = await repository.find_by_id(ingredient_id)
    if ingredient is None:
        return _not_found(ingredient_id)

    outcome = await _submit(repository, form, ingredient, payload, MESSAGE_UPDATED)
    if isinstance(outcome, FormOutcome) and outcome.submitted:
        # rejected values stay on the object for re-display but never get flushed
        repository.detach(ingredient)
    return outcome


async def delete_ingredient(repository: IngredientRepository, *, ingredient_id: int) -> RedirectOutcome:
    ingredient = await repository.find_by_id(ingredient_id)
    if ingredient is None:
        return _not_found(ingredient_id)

    if not await repository.delete(ingredient):
        return _not_found(ingredient_id)

    logger.info(f"Ingredient {ingredient_id} deleted")
    return _success(MESSAGE_DELETED)
