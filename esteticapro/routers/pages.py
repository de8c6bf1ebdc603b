"""
Page routes for the web interface
"""
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from starlette.convertors import Convertor, register_url_convertor

from esteticapro.templating import templates


class AnyTextConvertor(Convertor):
    """Like ``path`` but also matches across newlines."""

    regex = r"[\s\S]*"

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        return value


register_url_convertor("anytext", AnyTextConvertor())


def create_pages_router(*, img_src: str) -> APIRouter:
    """Factory that creates the HTML page router.

    ``img_src`` is the CSP directive listing the allowed image origins.
    """

    pages_router = APIRouter(tags=["pages"])

    # Matches the empty identifier and identifiers containing "/" or "\n"
    @pages_router.get("/post/{post_id:anytext}", response_class=HTMLResponse)
    async def post_page(request: Request, post_id: str):
        """Post page - echoes the identifier, no lookup"""
        response = templates.TemplateResponse(
            request,
            "post.html",
            {"post_id": post_id},
        )
        response.headers["Content-Security-Policy"] = f"default-src 'self'; {img_src}"
        return response

    return pages_router
