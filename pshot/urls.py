from pathlib import PurePosixPath
from urllib.parse import urlparse

from pshot.errors import UsageError

SCHEMES = ("http", "https", "file")


def validate_url(url: str | None) -> str:
    """Make sure ``url`` is something the browser can navigate to."""
    if not url or not url.strip():
        raise UsageError("URL is required")

    url = url.strip()
    parsed = urlparse(url)
    if parsed.scheme.lower() not in SCHEMES:
        raise UsageError(f"URL must start with http://, https:// or file://: {url}")
    if parsed.scheme.lower() != "file" and not parsed.netloc:
        raise UsageError(f"URL has no host: {url}")
    return url


def output_filename(url: str, default_basename: str = "index") -> str:
    """Name the stitched image after the last segment of the URL path.

    Example:
        output_filename("https://example.com/blog/post.html") == "post.png"
        output_filename("https://example.com/") == "index.png"
    """
    name = PurePosixPath(urlparse(url).path).name.replace("\x00", "")
    stem = PurePosixPath(name).stem if name else ""
    if not stem or stem in (".", ".."):
        stem = default_basename
    return f"{stem}.png"
