"""Input adapters that turn text sources into a stream of text chunks.

Bytes are decoded as latin-1, which maps every byte to exactly one
character. Only ASCII letters count as word characters, so any non-ASCII
byte acts as a separator regardless of the file's real encoding.
"""

import os
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

import requests

from .errors import InputReadError

# Default read size for streams, in characters or bytes
DEFAULT_CHUNK_SIZE = 64 * 1024

# Default timeout for HTTP requests (in seconds)
DEFAULT_TIMEOUT = 30

# Default headers for HTTP requests
DEFAULT_HEADERS = {
    "User-Agent": "wordrank/0.1 (word frequency ranking)",
}

BYTES_ENCODING = "latin-1"

# Source spec meaning standard input
STDIN_SPEC = "-"


def is_url(path: str) -> bool:
    """Check if a path is an HTTP/HTTPS URL.

    Args:
        path: Path string to check.

    Returns:
        True if the path starts with http:// or https://.
    """
    return path.startswith("http://") or path.startswith("https://")


def _as_text(chunk: str | bytes | bytearray) -> str:
    if isinstance(chunk, (bytes, bytearray)):
        return bytes(chunk).decode(BYTES_ENCODING)
    return chunk


def _iter_stream(stream: Any, chunk_size: int) -> Iterator[str]:
    try:
        while True:
            chunk = stream.read(chunk_size)
            if not chunk:
                break
            yield _as_text(chunk)
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"Failed to read input stream: {e}") from e


def _iter_path(path: Path, chunk_size: int) -> Iterator[str]:
    try:
        f = open(path, "rb")
    except OSError as e:
        raise InputReadError(f"Cannot open input file {path}: {e}") from e
    with f:
        yield from _iter_stream(f, chunk_size)


def iter_url(
    url: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    timeout: float = DEFAULT_TIMEOUT,
) -> Iterator[str]:
    """Stream the body of an HTTP(S) resource as text chunks.

    Args:
        url: The URL to fetch.
        chunk_size: Bytes per chunk.
        timeout: Request timeout in seconds.

    Yields:
        Decoded text chunks.

    Raises:
        InputReadError: If the request fails or returns an error status.
    """
    try:
        with requests.get(url, timeout=timeout, stream=True, headers=DEFAULT_HEADERS) as response:
            response.raise_for_status()
            for chunk in response.iter_content(chunk_size=chunk_size):
                if chunk:
                    yield _as_text(chunk)
    except requests.RequestException as e:
        raise InputReadError(f"Failed to fetch URL {url}: {e}") from e


def iter_chunks(source: Any, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[str]:
    """Yield text chunks from any supported source.

    Supported sources:
        - ``str``: in-memory text (not a path, use ``Path`` for files)
        - ``bytes`` / ``bytearray``: in-memory data
        - objects with a ``read()`` method returning str or bytes
        - ``os.PathLike``: a file, opened in binary mode
        - any other iterable of str/bytes chunks

    Raises:
        InputReadError: If the source cannot be read.
        TypeError: If the source is of an unsupported type.
    """
    if isinstance(source, str):
        yield source
    elif isinstance(source, (bytes, bytearray)):
        yield _as_text(source)
    elif hasattr(source, "read"):
        yield from _iter_stream(source, chunk_size)
    elif isinstance(source, os.PathLike):
        yield from _iter_path(Path(source), chunk_size)
    elif isinstance(source, Iterable):
        try:
            for chunk in source:
                yield _as_text(chunk)
        except InputReadError:
            raise
        except OSError as e:
            raise InputReadError(f"Failed to read input: {e}") from e
    else:
        raise TypeError(f"Unsupported input source: {type(source).__name__}")


def open_source(
    spec: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    timeout: float = DEFAULT_TIMEOUT,
) -> Iterator[str]:
    """Resolve a command-line style source string to a chunk stream.

    ``-`` reads standard input, ``http(s)://`` URLs are fetched, and anything
    else is treated as a filesystem path.
    """
    if spec == STDIN_SPEC:
        return _iter_stream(sys.stdin.buffer, chunk_size)
    if is_url(spec):
        return iter_url(spec, chunk_size=chunk_size, timeout=timeout)
    return _iter_path(Path(spec), chunk_size)
