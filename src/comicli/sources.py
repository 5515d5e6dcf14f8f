import logging
from contextlib import contextmanager
from pathlib import Path

import requests

from comicli.errors import SourceError, UnknownComicId, UnknownSource

logger = logging.getLogger(__name__)

XKCD_LATEST_URL = "https://xkcd.com/info.0.json"
XKCD_COMIC_URL = "https://xkcd.com/{comic_id}/info.0.json"
REQUEST_TIMEOUT = 30


@contextmanager
def _session_scope(session: requests.Session | None):
    """Yield ``session`` as is, or a fresh one that is closed afterwards."""
    if session is not None:
        yield session
        return
    with requests.Session() as own:
        yield own


def xkcd_metadata_url(comic_id: str | None = None) -> str:
    if comic_id is None:
        return XKCD_LATEST_URL
    return XKCD_COMIC_URL.format(comic_id=comic_id)


def _get(session: requests.Session, url: str) -> requests.Response:
    logger.debug("GET %s", url)
    try:
        return session.get(url, timeout=REQUEST_TIMEOUT)
    except requests.RequestException as e:
        raise SourceError(f"HTTP error fetching {url}: {e}") from e


def xkcd_image_url(comic_id: str | None = None, session: requests.Session | None = None) -> str:
    """Look up the ``img`` URL of an xkcd comic; the latest one if no ID is given."""
    url = xkcd_metadata_url(comic_id)
    with _session_scope(session) as session:
        response = _get(session, url)
    if response.status_code == 404:
        raise UnknownComicId(comic_id or "")
    try:
        response.raise_for_status()
        metadata = response.json()
    except ValueError as e:
        raise SourceError(f"Invalid JSON from {url}: {e}") from e
    except requests.RequestException as e:
        raise SourceError(f"HTTP error fetching {url}: {e}") from e

    image_url = metadata.get("img") if isinstance(metadata, dict) else None
    if not isinstance(image_url, str) or not image_url:
        raise SourceError(f"No image URL in metadata from {url}")
    logger.info("Resolved xkcd %s to %s", comic_id or "latest", image_url)
    return image_url


def download(url: str, session: requests.Session | None = None) -> bytes:
    with _session_scope(session) as session:
        response = _get(session, url)
    try:
        response.raise_for_status()
    except requests.RequestException as e:
        raise SourceError(f"HTTP error fetching {url}: {e}") from e
    return response.content


def _is_local_file(source: str) -> bool:
    try:
        return Path(source).is_file()
    except (OSError, ValueError):
        # Too long or otherwise unusable as a path; try it as a source name
        return False


def read_local(source: str) -> bytes:
    logger.debug("Reading local image %s", source)
    try:
        return Path(source).read_bytes()
    except OSError as e:
        raise SourceError(f"Cannot read {source}: {e}") from e


def fetch_image_bytes(source: str, session: requests.Session | None = None) -> bytes:
    """Resolve a source identifier to raw image bytes.

    ``xkcd`` fetches the latest comic and ``xkcd:<id>`` a specific one. A path
    to an existing local file is read as is. Anything else is an
    UnknownSource.
    """
    if _is_local_file(source):
        return read_local(source)

    prefix, _, comic_id = source.partition(":")
    if prefix != "xkcd":
        raise UnknownSource(source)

    with _session_scope(session) as session:
        image_url = xkcd_image_url(comic_id or None, session=session)
        return download(image_url, session=session)
