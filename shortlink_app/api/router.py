"""
Request router for the /api surface.

Every request under /api passes through `api_handler`: the API key is
validated first, then the exact request path is looked up in API_ROUTES.
Operation failures come back as AppError values and are rendered here.
"""

import json
import logging
from types import MappingProxyType

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from shortlink_app.api.handlers import HandlerResult, handle_add, handle_resolve
from shortlink_app.api.params import form_value
from shortlink_app.dependencies import get_link_service
from shortlink_app.errors import AppError, StoreError
from shortlink_app.schemas.link import ErrorEnvelope
from shortlink_app.services.api_key_service import validate_api_key
from shortlink_app.services.link_service import LinkService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["api"])

API_ROUTES = MappingProxyType({
    "/api/add": handle_add,
    "/api/resolve": handle_resolve,
})

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def render_error(app_error: AppError) -> Response:
    """Convert an AppError into the HTTP response
    
    500s carry only the message; the cause goes to the operator log.
    Everything else gets the {"Error", "Message", "Code"} envelope.
    """
    if app_error.code == 500:
        # Body is the bare message, encoded as a JSON string
        logger.error(f"error recorded: {app_error.cause}; message: {app_error.message}")
        return Response(
            content=json.dumps(app_error.message),
            status_code=500,
            media_type="application/json",
        )
    
    envelope = ErrorEnvelope(
        error=app_error.cause,
        message=app_error.message,
        code=app_error.code,
    )
    return JSONResponse(
        content=envelope.model_dump(by_alias=True),
        status_code=app_error.code,
    )


async def dispatch(request: Request, link_service: LinkService) -> HandlerResult:
    """Validate the API key and run the operation registered for the path"""
    key = await form_value(request, "apiKey")
    if not key:
        return AppError(None, "Invalid API Key", 401)
    
    try:
        api_key = validate_api_key(link_service.store, key)
    except StoreError as e:
        return AppError(e, "Error validating API key", 500)
    if api_key is None:
        return AppError(None, "Invalid API key.", 401)
    
    handler = API_ROUTES.get(request.url.path)
    if handler is None:
        return AppError(None, f"No API handler for {request.url.path}", 404)
    
    return await handler(request, api_key, link_service)


@router.api_route("/api/{api_path:path}", methods=ALL_METHODS, include_in_schema=False)
async def api_handler(
    request: Request,
    link_service: LinkService = Depends(get_link_service)
):
    result = await dispatch(request, link_service)
    if isinstance(result, AppError):
        return render_error(result)
    return JSONResponse(content=result.model_dump(mode="json", by_alias=True))
