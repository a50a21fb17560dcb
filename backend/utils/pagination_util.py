"""
Pagination header utilities.

Produces ``X-Total-Count`` and an RFC 5988 ``Link`` header for a page of
results, with next/prev/last/first relations built from the current request
URL.
"""

from typing import Dict, List

from starlette.datastructures import URL

from constants import HeaderNames
from domain.value_objects import Page

LINK_FORMAT = '<{uri}>; rel="{rel}"'


def prepare_page_uri(url: URL, page_number: int, page_size: int) -> str:
    """Current URL with page/size replaced and other query params kept."""
    uri = str(url.include_query_params(page=page_number, size=page_size))
    return uri.replace(",", "%2C").replace(";", "%3B")


def prepare_link(url: URL, page_number: int, page_size: int, rel: str) -> str:
    return LINK_FORMAT.format(uri=prepare_page_uri(url, page_number, page_size), rel=rel)


def generate_pagination_http_headers(url: URL | str, page: Page) -> Dict[str, str]:
    """
    Build pagination headers for a page of results.

    Args:
        url: URL of the current request
        page: Page returned by the repository

    Returns:
        Mapping with X-Total-Count and Link headers
    """
    if isinstance(url, str):
        url = URL(url)

    number, size = page.number, page.size
    links: List[str] = []
    if page.has_next:
        links.append(prepare_link(url, number + 1, size, "next"))
    if page.has_previous:
        links.append(prepare_link(url, number - 1, size, "prev"))
    last_page = max(page.total_pages - 1, 0)
    links.append(prepare_link(url, last_page, size, "last"))
    links.append(prepare_link(url, 0, size, "first"))

    return {
        HeaderNames.TOTAL_COUNT: str(page.total_elements),
        HeaderNames.LINK: ",".join(links),
    }
