from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse

from wem.core.errors import MissingContextError
from wem.ui.context import ClientContext
from wem.ui.options import form_options

router = APIRouter()


@router.get("/health", summary="Health Check")
async def health_check():
    return {"status": "healthy"}


@router.get("/api/form-options", summary="Form choices and insight category labels")
async def form_options_route():
    return form_options()


@router.get("/premium-insights", summary="Premium insights entry")
async def premium_insights_route(request: Request):
    """Validate the carried context; send the user back to the form when it is incomplete."""
    try:
        context = ClientContext.from_query(request.query_params)
    except MissingContextError:
        root = request.scope.get("root_path", "")
        return RedirectResponse(url=f"{root}/", status_code=302)
    return {
        "context": context.model_dump(by_alias=True),
        "categories": form_options()["categories"],
    }
