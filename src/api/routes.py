"""FastAPI routes for dog search, dog details, and health check."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from starlette.concurrency import run_in_threadpool

from src.data.schemas import DogDetailResponse
from src.search import recently_viewed

router = APIRouter()
templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


def _load_dog(request: Request, dog_id: str) -> DogDetailResponse:
    """Load a dog and update the recently viewed list in the session."""
    key = request.app.state.config.recently_viewed_key
    viewed = recently_viewed.load(request.session, key)

    response, viewed = request.app.state.dog_details.get_dog(dog_id, viewed)
    recently_viewed.store(request.session, key, viewed)
    return response


@router.get("/")
def home() -> RedirectResponse:
    """Send visitors to the search page."""
    return RedirectResponse(url="/search")


@router.get("/search", response_class=HTMLResponse)
def search_page(request: Request) -> HTMLResponse:
    """Render the search page.

    Query parameters are the search criteria; with none the page shows
    an empty form.
    """
    searcher = request.app.state.searcher
    page = searcher.show_search_page(dict(request.query_params))
    return templates.TemplateResponse(request, "search.html", {"page": page})


@router.api_route("/search/find", methods=["GET", "POST"])
async def find_dogs(request: Request) -> JSONResponse:
    """JSON search endpoint.

    Accepts criteria as query parameters or form fields and returns
    the Petfinder payload, or ``{"fail": true, "message": ...}``.
    """
    params = dict(request.query_params)
    if request.method == "POST":
        form = await request.form()
        params.update({key: str(value) for key, value in form.items()})

    searcher = request.app.state.searcher
    return JSONResponse(await run_in_threadpool(searcher.find_dogs, params))


@router.get("/dog/{dog_id}", response_class=HTMLResponse)
def dog_page(request: Request, dog_id: str) -> HTMLResponse:
    """Render the detail page for one dog."""
    response = _load_dog(request, dog_id)
    return templates.TemplateResponse(request, "dog.html", {"response": response})


@router.get("/api/dog/{dog_id}", response_model=DogDetailResponse)
def api_dog(request: Request, dog_id: str) -> DogDetailResponse:
    """JSON variant of the dog detail page."""
    return _load_dog(request, dog_id)


@router.get("/health")
def health_check(request: Request) -> dict:
    """Health check endpoint for monitoring.

    Returns:
        Dict with system health status.
    """
    petfinder_healthy = request.app.state.petfinder.ping()
    return {
        "status": "healthy" if petfinder_healthy else "degraded",
        "petfinder": "connected" if petfinder_healthy else "disconnected",
    }
