"""Static Assets: the HTML client page and its stylesheet, read once.

Invariants:
    - Files are read from disk once per process; requests serve cached bytes
    - A missing or unreadable file raises AssetLoadError (fail fast on startup)
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from status_demo.config import get_settings
from status_demo.core.errors import AssetLoadError

logger = logging.getLogger(__name__)

HTML_FILE = "client.html"
CSS_FILE = "style.css"


@dataclass(frozen=True)
class ClientAssets:
    html: bytes
    css: bytes


def _read(directory: Path, name: str) -> bytes:
    try:
        return (directory / name).read_bytes()
    except OSError as e:
        raise AssetLoadError(name, str(e)) from e


def load_client_assets(directory: Path) -> ClientAssets:
    """Read both client files from directory."""
    assets = ClientAssets(
        html=_read(directory, HTML_FILE),
        css=_read(directory, CSS_FILE),
    )
    logger.info(f"Loaded client assets from {directory}")
    return assets


@lru_cache
def get_client_assets() -> ClientAssets:
    return load_client_assets(get_settings().client_dir)
