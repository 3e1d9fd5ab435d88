"""
Sitemap endpoints and the XML response used by the sitemap middleware
"""

from fastapi import APIRouter, Request
from fastapi.responses import Response
import logging

from xmlsitemap.core.config import settings
from xmlsitemap.schemas.sitemap import SitemapOptions
from xmlsitemap.services.serializer import render_sitemap
from xmlsitemap.services.sitemap_generator import generate_entries

logger = logging.getLogger(__name__)

router = APIRouter()

SITEMAP_MEDIA_TYPE = "application/xml; charset=utf-8"
SITEMAP_HEADERS = {"X-Robots-Tag": "noindex"}


def site_base_url(request: Request) -> str:
    """Configured site root, otherwise the root the request was made against"""
    if settings.SITE_BASE_URL:
        return settings.SITE_BASE_URL.rstrip("/")
    return str(request.base_url).rstrip("/")


def sitemap_response(request: Request) -> Response:
    """
    Generate the sitemap for this request. Data errors propagate to the
    global exception handler so no partial document is sent.
    """
    entries = generate_entries(
        request.app.state.provider_factory,
        site_base_url(request),
        SitemapOptions.from_settings(settings),
    )
    return Response(
        content=render_sitemap(entries),
        media_type=SITEMAP_MEDIA_TYPE,
        headers=SITEMAP_HEADERS,
    )


@router.get("/entries")
def sitemap_entries(request: Request):
    """
    JSON preview of the URLs the sitemap currently lists
    """
    entries = generate_entries(
        request.app.state.provider_factory,
        site_base_url(request),
        SitemapOptions.from_settings(settings),
    )
    return {
        "count": len(entries),
        "entries": [entry.model_dump(mode="json", exclude_none=True) for entry in entries],
    }
