"""Auth endpoints.

- POST /api/auth/logout — end the caller's session
"""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from esteticapro.models.responses import DataEnvelope
from esteticapro.models.result import Ok
from esteticapro.services.session import SessionTerminator


def _access_token(request: Request, cookie_name: str) -> str | None:
    """Bearer token from the Authorization header, else the session cookie."""
    authorization = request.headers.get("authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return request.cookies.get(cookie_name) or None


def create_auth_router(
    *,
    session_terminator: SessionTerminator,
    session_cookie_name: str = "sb-access-token",
    refresh_cookie_name: str = "sb-refresh-token",
) -> APIRouter:
    """Factory that creates the auth router with injected dependencies."""

    auth_router = APIRouter(prefix="/api/auth", tags=["auth"])

    @auth_router.post("/logout")
    async def logout(request: Request) -> JSONResponse:
        """Sign out. 200 with ``{data: {success: true}}`` or 500 on any failure."""
        result = await session_terminator.terminate(
            _access_token(request, session_cookie_name)
        )
        envelope = DataEnvelope.from_result(result)

        if not isinstance(result, Ok):
            return JSONResponse(status_code=500, content=envelope.model_dump())

        response = JSONResponse(status_code=200, content=envelope.model_dump())
        response.delete_cookie(session_cookie_name, path="/")
        response.delete_cookie(refresh_cookie_name, path="/")
        return response

    return auth_router
