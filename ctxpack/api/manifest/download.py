"""Stream a URL to a local file."""

from pathlib import Path

import requests

from ..errors.TransportError import TransportError

_CHUNK_BYTES = 1024 * 1024


def download(url: str, destination: Path, *, user_agent: str, timeout: float | None = None) -> int:
    """Download url to destination, creating parent directories.

    Returns:
        Number of bytes written

    Raises:
        TransportError: If the request fails or returns a non-2xx status
    """
    destination.parent.mkdir(parents=True, exist_ok=True)
    written = 0
    try:
        with requests.get(url, headers={"User-Agent": user_agent}, stream=True, timeout=timeout) as response:
            response.raise_for_status()
            with destination.open("wb") as fh:
                for block in response.iter_content(chunk_size=_CHUNK_BYTES):
                    if block:
                        fh.write(block)
                        written += len(block)
    except requests.RequestException as e:
        raise TransportError(url, str(e)) from e
    return written
