"""Fetch mapping files from disk or over HTTP."""

import http.client
import logging
import urllib.error
import urllib.request
from pathlib import Path
from urllib.parse import urlparse

from ucm_charmap.codec.ucm_parser import parse_ucm
from ucm_charmap.config.settings import get_base_dir, get_timeout
from ucm_charmap.core.errors import FetchError
from ucm_charmap.core.mapping import RawMapping

logger = logging.getLogger(__name__)

URL_SCHEMES = ("http", "https")


def resolve_path(locator: str, base_dir: str | Path | None = None) -> Path:
    """
    Local path for a ``file:`` locator or plain path.

    ``file:name.ucm`` is relative to ``base_dir``; ``file:///abs/name.ucm``
    and absolute paths are used as-is.
    """
    base = Path(base_dir) if base_dir is not None else get_base_dir()
    if locator.startswith("file:"):
        parsed = urlparse(locator)
        if parsed.netloc not in ("", "localhost"):
            raise FetchError(locator, f"unsupported file host {parsed.netloc!r}")
        raw = urllib.request.url2pathname(parsed.path) if parsed.path.startswith("/") else parsed.path
        path = Path(raw)
    else:
        path = Path(locator)
    path = path.expanduser()
    if not path.is_absolute():
        path = base / path
    return path


def fetch_mapping(
    locator: str,
    base_dir: str | Path | None = None,
    timeout: float | None = None,
) -> bytes:
    """
    Return the raw bytes of a mapping file.

    Args:
        locator: ``http(s)://`` URL, ``file:`` locator, or filesystem path
        base_dir: Directory for relative locators (default from settings)
        timeout: Network timeout in seconds (default from settings)

    Raises:
        FetchError: The source could not be read.
    """
    try:
        scheme = urlparse(locator).scheme.lower()
    except ValueError as e:
        raise FetchError(locator, str(e)) from e

    if scheme in URL_SCHEMES:
        timeout = get_timeout() if timeout is None else timeout
        logger.info("Downloading %s", locator)
        try:
            with urllib.request.urlopen(locator, timeout=timeout) as response:
                status = getattr(response, "status", 200)
                if status != 200:
                    raise FetchError(locator, f"HTTP status {status}")
                return response.read()
        except urllib.error.HTTPError as e:
            raise FetchError(locator, f"HTTP status {e.code}") from e
        except (urllib.error.URLError, OSError) as e:
            raise FetchError(locator, str(getattr(e, "reason", e))) from e
        except (http.client.HTTPException, ValueError) as e:
            raise FetchError(locator, str(e) or type(e).__name__) from e

    # Single letters are Windows drive letters, not schemes
    if scheme and scheme != "file" and len(scheme) > 1:
        raise FetchError(locator, f"unsupported scheme {scheme!r}")

    path = resolve_path(locator, base_dir)
    logger.info("Reading %s", path)
    try:
        return path.read_bytes()
    except OSError as e:
        raise FetchError(locator, e.strerror or str(e)) from e


def load_mapping(locator: str, base_dir: str | Path | None = None) -> RawMapping:
    """Fetch and parse a mapping file."""
    return parse_ucm(fetch_mapping(locator, base_dir=base_dir), locator=locator)
