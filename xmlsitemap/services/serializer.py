"""
Sitemap serializer. Renders entries as a sitemap protocol document and reads
such documents back.
"""

import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Union

from xmlsitemap.schemas.sitemap import ChangeFrequency, SitemapEntry

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
_NS = {"sm": SITEMAP_NS}

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


def format_lastmod(value: datetime) -> str:
    """W3C datetime; naive timestamps are taken as UTC"""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat(timespec="seconds")


def format_priority(value: float) -> str:
    if round(value, 1) == value:
        return f"{value:.1f}"
    return str(value)


def render_sitemap(entries: Iterable[SitemapEntry]) -> str:
    """
    Build the <urlset> document. Optional elements are only written when the
    entry carries a value; text is escaped by ElementTree.
    """
    urlset = ET.Element("urlset", xmlns=SITEMAP_NS)

    for entry in entries:
        url_el = ET.SubElement(urlset, "url")
        ET.SubElement(url_el, "loc").text = entry.loc
        if entry.lastmod is not None:
            ET.SubElement(url_el, "lastmod").text = format_lastmod(entry.lastmod)
        if entry.changefreq is not None:
            ET.SubElement(url_el, "changefreq").text = entry.changefreq.value
        if entry.priority is not None:
            ET.SubElement(url_el, "priority").text = format_priority(entry.priority)

    ET.indent(urlset, space="  ")
    return XML_DECLARATION + ET.tostring(urlset, encoding="unicode") + "\n"


def _text(element: ET.Element, tag: str) -> Optional[str]:
    child = element.find(f"sm:{tag}", _NS)
    if child is None or not child.text:
        return None
    return child.text.strip()


def parse_sitemap(document: Union[str, bytes]) -> List[SitemapEntry]:
    """
    Read the <url> entries of a sitemap document.

    Raises ``xml.etree.ElementTree.ParseError`` for malformed XML.
    """
    if isinstance(document, str):
        document = document.encode("utf-8")
    root = ET.fromstring(document)

    entries: List[SitemapEntry] = []
    for url_el in root.findall("sm:url", _NS):
        loc = _text(url_el, "loc")
        if not loc:
            continue

        lastmod = _text(url_el, "lastmod")
        changefreq = _text(url_el, "changefreq")
        priority = _text(url_el, "priority")
        entries.append(SitemapEntry(
            loc=loc,
            lastmod=datetime.fromisoformat(lastmod) if lastmod else None,
            changefreq=ChangeFrequency(changefreq) if changefreq else None,
            priority=float(priority) if priority else None,
        ))

    return entries
