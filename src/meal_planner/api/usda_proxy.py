"""Same-origin FoodData Central proxy endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from meal_planner.api.routes import require_api_token
from meal_planner.domain.errors import UpstreamUnavailable

if TYPE_CHECKING:
    from meal_planner.containers import AppContainer

router = APIRouter(tags=["usda"], dependencies=[Depends(require_api_token)])


@router.get("/usda", response_model=None)
async def usda_proxy(  # noqa: PLR0913
    request: Request,
    action: str | None = None,
    query: str | None = None,
    page_size: int = Query(default=25, alias="pageSize", ge=1, le=200),
    page_number: int = Query(default=1, alias="pageNumber", ge=1),
    fdc_id: int | None = Query(default=None, alias="fdcId"),
) -> dict[str, object] | JSONResponse:
    """Forward ?action=search&query= or ?action=details&fdcId= to FDC."""
    container: AppContainer = request.app.state.container
    try:
        if action == "search":
            if not query:
                return _error(400, "Missing query parameter")
            return await container.usda_proxy.search(query, page_size, page_number)
        if action == "details":
            if fdc_id is None:
                return _error(400, "Missing fdcId parameter")
            return await container.usda_proxy.details(fdc_id)
    except UpstreamUnavailable as exc:
        return _error(exc.status_code or 502, exc.message)
    return _error(400, "Invalid action")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)
