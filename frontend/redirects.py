# frontend/redirects.py

from typing import Optional
from urllib.parse import urlparse

GITHUB_DOMAINS = {"github.com", "www.github.com"}


def is_github_url(url: str) -> bool:
    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
    except (ValueError, TypeError, AttributeError):
        return False
    return parsed.scheme == "https" and hostname in GITHUB_DOMAINS


def is_github_user_path(url: str, username: str) -> bool:
    """
    True if url is an https GitHub page whose first path segment is username.
    """
    if not is_github_url(url):
        return False
    segments = [segment for segment in urlparse(url).path.split("/") if segment]
    if not segments:
        return False
    return segments[0] == username


def safe_redirect_target(referer: Optional[str], github_user: Optional[str], fallback_url: str) -> str:
    """
    Choose where to send the browser after a click.

    The referer is trusted only when it is a GitHub page (owned by
    github_user, if one is configured); anything else goes to fallback_url.
    """
    if not referer:
        return fallback_url
    if github_user:
        allowed = is_github_user_path(referer, github_user)
    else:
        allowed = is_github_url(referer)
    return referer if allowed else fallback_url
