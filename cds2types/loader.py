"""
Loading of compiled CDS models.

A CSN document can come from a file written by ``cds compile --to csn``,
from a running CAP server or from standard input. Every source is checked
for a top level ``definitions`` object before it reaches the generator.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, TextIO, Union
from urllib.parse import urlparse

import requests

from .codegen.core.cds import CSNError
from .logging_config import get_logger

logger = get_logger(__name__)

CSN_SUFFIXES = (".json", ".csn")


class CSNLoadError(CSNError):
    """Raised when a CSN document cannot be read or is not a CDS model."""

    pass


def check_csn(data: Any, source: str) -> Dict[str, Any]:
    """
    Make sure parsed JSON is a compiled CDS model.

    Args:
        data: Parsed JSON document
        source: Where the document came from, for messages

    Returns:
        The document itself

    Raises:
        CSNLoadError: If there is no ``definitions`` object
    """
    if not isinstance(data, dict) or not isinstance(data.get("definitions"), dict):
        raise CSNLoadError(
            f"{source} has no 'definitions' object, is it compiled CSN?"
        )

    logger.info("Loaded %d definitions from %s", len(data["definitions"]), source)
    return data


def read_csn_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Read a CSN document from a local file."""
    path = Path(path)

    if path.suffix.lower() not in CSN_SUFFIXES:
        logger.warning("Unexpected extension for a CSN file: %s", path)

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise CSNLoadError(f"File not found: {path}") from e
    except json.JSONDecodeError as e:
        raise CSNLoadError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise CSNLoadError(f"Cannot read {path}: {e}") from e

    return check_csn(data, str(path))


def read_csn_stream(stream: TextIO, source: str = "<stdin>") -> Dict[str, Any]:
    """Read a CSN document from an open text stream."""
    try:
        data = json.load(stream)
    except json.JSONDecodeError as e:
        raise CSNLoadError(f"Invalid JSON in {source}: {e}") from e

    return check_csn(data, source)


def fetch_csn(url: str, timeout: int = 30) -> Dict[str, Any]:
    """
    Fetch a CSN document over HTTP.

    Args:
        url: Address of the CSN document
        timeout: Request timeout in seconds

    Raises:
        CSNLoadError: If the URL is malformed, the request fails or the
            response is not a CDS model
    """
    parsed = urlparse(url)
    if not (parsed.scheme and parsed.netloc):
        raise CSNLoadError(f"Invalid URL: {url}")

    logger.debug("Fetching CSN from %s", url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.Timeout as e:
        raise CSNLoadError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        raise CSNLoadError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.JSONDecodeError as e:
        raise CSNLoadError(f"Response from {url} is not JSON: {e}") from e
    except requests.exceptions.RequestException as e:
        raise CSNLoadError(f"Request error for URL {url}: {e}") from e

    return check_csn(data, url)


def load_csn(
    file_path: Optional[Union[str, Path]] = None,
    url: Optional[str] = None,
    timeout: int = 30,
) -> Dict[str, Any]:
    """Load a CSN document from exactly one of a file or a URL."""
    if bool(file_path) == bool(url):
        raise CSNLoadError("Exactly one of file_path or url must be given")

    if file_path:
        return read_csn_file(file_path)
    return fetch_csn(url, timeout)
