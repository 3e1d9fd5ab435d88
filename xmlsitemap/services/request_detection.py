"""
Decides whether an inbound request asks for the sitemap
"""

import re
from typing import Mapping

# Decoded request path, e.g. "/sitemap.xml" or "/de/Sitemap.XML"
SITEMAP_PATH_RE = re.compile(r"/sitemap\.xml$", re.IGNORECASE)

# Raw request URI, which may still carry a query string or fragment
SITEMAP_URI_RE = re.compile(r"/sitemap\.xml(?=$|[?#])", re.IGNORECASE)

# Explicit trigger: index.php?option=com_ajax&plugin=xmlsitemap&group=system
AJAX_TRIGGER = {
    "option": "com_ajax",
    "plugin": "xmlsitemap",
    "group": "system",
}


def is_sitemap_path(path: str, request_uri: str = "") -> bool:
    """Check both the decoded path and the raw request URI"""
    if path and SITEMAP_PATH_RE.search(path):
        return True
    if request_uri and SITEMAP_URI_RE.search(request_uri):
        return True
    return False


def is_ajax_trigger(params: Mapping[str, str]) -> bool:
    return all(params.get(key) == value for key, value in AJAX_TRIGGER.items())


def should_generate(path: str, request_uri: str, params: Mapping[str, str]) -> bool:
    return is_sitemap_path(path, request_uri) or is_ajax_trigger(params)
