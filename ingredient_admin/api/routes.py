"""
URL table for the HTML interface.

Handlers are plain functions; which path and methods reach them is decided
here only.
"""

from dataclasses import dataclass
from typing import Callable

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from ingredient_admin.api.endpoints import home, ingredients


@dataclass(frozen=True)
class Route:
    path: str
    methods: tuple[str, ...]
    endpoint: Callable
    name: str


ROUTES: list[Route] = [
    Route("/", ("GET",), home.home, "home"),
    Route("/ingredient", ("GET",), ingredients.index, "ingredient_index"),
    Route("/ingredient/nouveau", ("GET", "POST"), ingredients.create, "ingredient_new"),
    Route("/ingredient/modification/{ingredient_id}", ("GET", "POST"), ingredients.edit, "ingredient_edit"),
    Route("/ingredient/suppression/{ingredient_id}", ("GET",), ingredients.delete, "ingredient_delete"),
]


def build_router(routes: list[Route] = ROUTES) -> APIRouter:
    router = APIRouter()
    for route in routes:
        router.add_api_route(
            route.path,
            route.endpoint,
            methods=list(route.methods),
            name=route.name,
            response_class=HTMLResponse,
            include_in_schema=False,
        )
    return router
