from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import RedirectResponse
from shortlink_app.services.link_service import LinkService
from shortlink_app.dependencies import get_link_service

router = APIRouter(tags=["redirect"])


@router.get("/{path}")
async def redirect_to_destination(
    path: str,
    link_service: LinkService = Depends(get_link_service)
):
    """
    Redirect a short path to its destination URL.
    
    Public: no API key. Same exactly-one-match rule as /api/resolve.
    """
    link = link_service.resolve_path(path)
    
    if link is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Short URL not found"
        )
    
    return RedirectResponse(url=link.url, status_code=status.HTTP_302_FOUND)
