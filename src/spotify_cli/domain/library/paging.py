"""Eager pagination of a remote collection into one in-memory dataset."""

from loguru import logger

from spotify_cli.core.errors import FetchError

from .models import Dataset
from .provider import PageSource

DEFAULT_PAGE_SIZE = 25


def fetch_all(source: PageSource, page_size: int = DEFAULT_PAGE_SIZE) -> Dataset:
    """Fetch every page of `source` and flatten them in server order.

    The first request reveals the total; further requests follow at offsets
    page_size, 2*page_size, ... until the total is covered. Any failed page
    aborts the fetch and nothing partial is returned.

    Args:
        source: Remote page source
        page_size: Items requested per page

    Returns:
        Tuple of all entries, page order then within-page order

    Raises:
        FetchError: If any page request fails
        ValueError: If page_size is not positive
    """
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")

    first_page = _fetch_page(source, 0, page_size)
    total = first_page.total
    entries = list(first_page.items)
    logger.debug(f"Fetched first page: {len(first_page.items)} of {total} albums")

    offset = page_size
    while offset < total:
        page = _fetch_page(source, offset, page_size)
        entries.extend(page.items)
        offset += page_size

    logger.info(f"Fetched {len(entries)} saved albums ({total} reported)")
    return tuple(entries)


def _fetch_page(source: PageSource, offset: int, limit: int):
    try:
        return source.get_page(offset, limit)
    except Exception as e:
        logger.exception(f"Page request failed at offset {offset}")
        raise FetchError(
            offset, f"Could not fetch saved albums at offset {offset}: {e}"
        ) from e
