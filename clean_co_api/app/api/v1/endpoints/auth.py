"""
Authentication endpoints for API v1.

``POST /auth/access-token`` signs whatever identity the client sends
and returns it as an ``HttpOnly`` cookie.  There is no password check:
the frontend authenticates users itself and only needs a credential the
API can verify on later requests.
"""

from fastapi import APIRouter, HTTPException, Response, status

from clean_co_api.app.core.config import settings
from clean_co_api.app.core.security import create_access_token
from clean_co_api.app.schemas.auth import AccessTokenIssued, AccessTokenRequest


router = APIRouter()


@router.post("/access-token", response_model=AccessTokenIssued)
async def issue_access_token(user: AccessTokenRequest, response: Response) -> AccessTokenIssued:
    """Issue a one-hour access token in the ``token`` cookie."""
    try:
        token = create_access_token(user.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    # The frontend lives on another site, so the cookie must be
    # cross-site, which browsers only accept together with Secure.
    response.set_cookie(
        key=settings.token_cookie_name,
        value=token,
        httponly=True,
        secure=True,
        samesite="none",
    )
    return AccessTokenIssued(success=True)
