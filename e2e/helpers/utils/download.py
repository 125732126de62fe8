"""
Blocking HTTP downloads of test artifacts
The response body is written as-is; callers inspect the logged status code.
"""

from pathlib import Path, PurePosixPath
from typing import Optional, Union
from urllib.parse import unquote, urlsplit

import httpx

from helpers.config import get_settings
from helpers.exceptions import DownloadError
from helpers.logging_config import log_download


def default_file_name(url: str) -> str:
    """Return the final path segment of url, ignoring query and fragment"""
    name = PurePosixPath(unquote(urlsplit(url).path)).name
    if not name:
        raise ValueError(f"Cannot derive a file name from URL: {url}")
    return name


def _new_client() -> httpx.Client:
    active = get_settings()
    return httpx.Client(
        follow_redirects=active.DOWNLOAD_FOLLOW_REDIRECTS,
        timeout=active.DOWNLOAD_TIMEOUT_SECONDS,
    )


def _fetch(url: str, client: Optional[httpx.Client]) -> httpx.Response:
    try:
        if client is not None:
            return client.get(url)
        with _new_client() as owned:
            return owned.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise DownloadError(url, f"{type(e).__name__}: {e}") from e


def wget(
    url: str,
    file: Optional[Union[str, Path]] = None,
    *,
    client: Optional[httpx.Client] = None,
) -> Path:
    """
    Download url into file (default: the URL's last path segment).

    An existing file is overwritten. The status code is logged but not
    checked, so an error page body still lands on disk.
    """
    destination = Path(file) if file is not None else Path(default_file_name(url))

    response = _fetch(url, client)

    with open(destination, "wb") as f:
        f.write(response.content)

    log_download(url, response.status_code)
    return destination
