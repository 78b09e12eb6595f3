# aptree/modules/fetch.py
"""
fetch.py - obtains the raw text of a package index.

- Local mode (--test): reads a Packages file from disk.
- Remote mode: downloads <repo>/Packages over HTTP(S) or any URL scheme
  urllib understands.
- ``.gz`` and ``.xz`` indexes are decompressed transparently in both modes.
"""

from __future__ import annotations
import gzip
import lzma
import os
import urllib.error
import urllib.request
import zlib
from typing import Optional

from aptree.modules import logger as _logger
from aptree.modules.config import config

DEFAULT_INDEX_NAME = "Packages"
DEFAULT_TIMEOUT = 30
COMPRESSED_SUFFIXES = (".gz", ".xz")


class FetchError(Exception):
    pass


def _decode(data: bytes, origin: str) -> str:
    try:
        if origin.endswith(".gz"):
            data = gzip.decompress(data)
        elif origin.endswith(".xz"):
            data = lzma.decompress(data, format=lzma.FORMAT_XZ)
    except (OSError, EOFError, zlib.error, lzma.LZMAError) as e:
        raise FetchError(f"Could not decompress {origin}: {e}")
    return data.decode("utf-8", errors="replace")


def index_name() -> str:
    return config.get("repository", "index_name", fallback=DEFAULT_INDEX_NAME)


def index_url(repo: str) -> str:
    """URL of the index file for `repo`; a URL already naming the index is kept."""
    name = index_name()
    if repo.endswith(name) or any(repo.endswith(name + suffix) for suffix in COMPRESSED_SUFFIXES):
        return repo
    return repo.rstrip("/") + "/" + name


def read_local(path: str) -> str:
    log = _logger.get_logger("fetch")
    if not os.path.isfile(path):
        raise FetchError(f"Repository file not found: {path}")
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise FetchError(f"Could not read {path}: {e}")
    log.info(f"Read {len(data)} bytes from {path}")
    return _decode(data, path)


def read_remote(repo: str, timeout: Optional[int] = None) -> str:
    log = _logger.get_logger("fetch")
    url = index_url(repo)
    if timeout is None:
        timeout = config.getint("repository", "timeout", fallback=DEFAULT_TIMEOUT)

    log.info(f"Downloading {url}")
    try:
        with urllib.request.urlopen(url, timeout=timeout) as resp:
            data = resp.read()
    except ValueError as e:
        raise FetchError(f"Malformed repository URL {url}: {e}")
    except urllib.error.HTTPError as e:
        raise FetchError(f"HTTP {e.code} fetching {url}: {e.reason}")
    except urllib.error.URLError as e:
        raise FetchError(f"Could not reach {url}: {e.reason}")
    except OSError as e:
        raise FetchError(f"Error fetching {url}: {e}")
    log.info(f"Downloaded {len(data)} bytes from {url}")
    return _decode(data, url)


def load_text(repo: str, local: bool = False) -> str:
    if local:
        return read_local(repo)
    return read_remote(repo)
