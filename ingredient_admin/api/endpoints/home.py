from fastapi import Request

from ingredient_admin.core.templating import render


async def home(request: Request):
    return render(request, "page/accueil.html")
