from typing import Any

from fastapi import Depends, Query, Request
from fastapi.responses import RedirectResponse

from ingredient_admin.core.config import settings
from ingredient_admin.core.templating import notification_store, render
from ingredient_admin.db.session import get_repository
from ingredient_admin.repositories.ingredient_repository import IngredientRepository
from ingredient_admin.schemas import IngredientForm
from ingredient_admin.services import ingredient_service
from ingredient_admin.services.ingredient_service import FormOutcome, RedirectOutcome


def get_form() -> IngredientForm:
    return IngredientForm()


async def _payload(request: Request) -> dict[str, Any] | None:
    if request.method != "POST":
        return None
    form_data = await request.form()
    return dict(form_data)


def _redirect(request: Request, outcome: RedirectOutcome) -> RedirectResponse:
    if outcome.notification is not None:
        notification_store(request).push(outcome.notification)
    return RedirectResponse(request.url_for(outcome.route_name), status_code=303)


def _respond(request: Request, outcome: FormOutcome | RedirectOutcome, template: str):
    if isinstance(outcome, RedirectOutcome):
        return _redirect(request, outcome)

    status_code = 422 if outcome.violations else 200
    return render(request, template, {"form": outcome}, status_code=status_code)


async def index(
    request: Request,
    page: int = Query(1, description="1-based page number"),
    repository: IngredientRepository = Depends(get_repository),
):
    outcome = await ingredient_service.list_ingredients(
        repository, page=page, page_size=settings.PAGE_SIZE
    )
    return render(request, "page/ingredient/index.html", {"ingredients": outcome.page})


async def create(
    request: Request,
    repository: IngredientRepository = Depends(get_repository),
    form: IngredientForm = Depends(get_form),
):
    outcome = await ingredient_service.create_ingredient(
        repository, form, payload=await _payload(request)
    )
    return _respond(request, outcome, "page/ingredient/nouveau.html")


async def edit(
    request: Request,
    ingredient_id: int,
    repository: IngredientRepository = Depends(get_repository),
    form: IngredientForm = Depends(get_form),
):
    outcome = await ingredient_service.edit_ingredient(
        repository, form, ingredient_id=ingredient_id, payload=await _payload(request)
    )
    return _respond(request, outcome, "page/ingredient/modification.html")


async def delete(
    request: Request,
    ingredient_id: int,
    repository: IngredientRepository = Depends(get_repository),
):
    outcome = await ingredient_service.delete_ingredient(repository, ingredient_id=ingredient_id)
    return _redirect(request, outcome)
