"""Retrieve and parse the release manifest."""

import requests
from pydantic import ValidationError

from ..config.ReleaseConfig import ReleaseConfig
from ..errors.ManifestError import ManifestError
from ..errors.TransportError import TransportError
from .Manifest import Manifest


def fetch_manifest(release: ReleaseConfig) -> Manifest:
    """GET the manifest for the configured release version.

    Raises:
        TransportError: If the request fails or returns a non-2xx status
        ManifestError: If the body is not a valid manifest
    """
    url = release.manifest_url
    try:
        with requests.get(
            url,
            headers={"User-Agent": release.user_agent, "Accept": "application/json"},
            timeout=release.timeout_secs,
        ) as response:
            response.raise_for_status()
            body = response.content
    except requests.RequestException as e:
        raise TransportError(url, str(e)) from e

    try:
        return Manifest.model_validate_json(body)
    except ValidationError as e:
        raise ManifestError(url, str(e)) from e
