from fastapi import Request
from fastapi.responses import JSONResponse

from .normalize import normalize_resource
from .resources import JsonResource


def success_response(resource: JsonResource, request: Request) -> JSONResponse:
    """Normalize *resource* for *request* and render it as a JSON response."""
    response = normalize_resource(resource, request)
    return JSONResponse(content=response.to_dict(), status_code=response.status)
