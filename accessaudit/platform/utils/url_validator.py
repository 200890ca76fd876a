from typing import Tuple
from urllib.parse import urlparse


def validate_url(url: str) -> Tuple[bool, str]:
    """
    Accept only absolute http(s) URLs with a host.

    Unlike a browser address bar, no scheme is assumed: "example.com" is rejected.
    """
    if not url or not url.strip():
        return False, "URL cannot be empty"

    try:
        parsed = urlparse(url.strip())
    except ValueError as e:
        return False, f"URL parsing error: {str(e)}"

    if parsed.scheme not in ["http", "https"]:
        return False, f"Invalid URL scheme: {parsed.scheme or 'none'} (must be http or https)"

    if not parsed.netloc or not parsed.hostname:
        return False, "Invalid URL format: missing domain"

    return True, ""
