"""
API operations.

Each handler receives the request, the validated API key record and the
link service, and returns either a response model or an AppError value.
"""

from typing import Union

from fastapi import Request
from pydantic import BaseModel

from shortlink_app.api.params import form_value
from shortlink_app.config import settings
from shortlink_app.errors import AppError, LinkCreationError, StoreError
from shortlink_app.models import APIKey
from shortlink_app.schemas.link import AddSuccessResponse, LinkOut, ResolveResponse
from shortlink_app.services.link_service import LinkService

HandlerResult = Union[BaseModel, AppError]


def _invalid_method(request: Request) -> AppError:
    return AppError(None, f"Invalid request method: {request.method}", 401)


async def handle_add(request: Request, api_key: APIKey, link_service: LinkService) -> HandlerResult:
    """Shorten the submitted `url` (POST only)"""
    if request.method != "POST":
        return _invalid_method(request)
    
    url = await form_value(request, "url")
    custom_path = await form_value(request, "path")
    
    try:
        path = link_service.create_short_link(url, custom_path or None)
    except (LinkCreationError, StoreError) as e:
        # Bad input and store failures are not told apart here
        return AppError(e, str(e), 400)
    
    host = request.headers.get("host", "")
    return AddSuccessResponse(result_url=f"{settings.result_url_scheme}://{host}/{path}")


async def handle_resolve(request: Request, api_key: APIKey, link_service: LinkService) -> HandlerResult:
    """Look up the link stored for `path` (GET only)"""
    if request.method != "GET":
        return _invalid_method(request)
    
    path = await form_value(request, "path")
    if not path:
        return AppError(None, "The `path` parameter is required. ", 401)
    
    link = link_service.resolve_path(path)
    if link is None:
        return ResolveResponse(success=False)
    return ResolveResponse(success=True, result=LinkOut.model_validate(link))
