"""
Reading caller-supplied parameters.

A parameter may arrive in the query string, in a form body, or in a JSON
object body. Body values win over query values, matching the usual form
semantics. Starlette caches the parsed body on the request, so repeated
lookups are cheap.
"""

from json import JSONDecodeError
from typing import Any, Dict

from fastapi import Request
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def _body_values(request: Request) -> Dict[str, Any]:
    content_type = request.headers.get("content-type", "")
    
    if content_type.startswith(FORM_CONTENT_TYPES):
        try:
            form = await request.form()
        except (HTTPException, MultiPartException):
            # Malformed form bodies read as empty
            return {}
        return {key: value for key, value in form.items() if isinstance(value, str)}
    
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except (JSONDecodeError, UnicodeDecodeError):
            return {}
        if isinstance(payload, dict):
            return {key: value for key, value in payload.items() if isinstance(value, str)}
    
    return {}


async def form_value(request: Request, name: str) -> str:
    """Get the first value of a parameter, or "" when it is absent"""
    body = await _body_values(request)
    if body.get(name):
        return body[name]
    return request.query_params.get(name, "")
