"""Resolve asset URLs stored by the review API into absolute URLs.

The API stores covers, avatars and uploads either as absolute URLs, as
server paths ("/api/files/covers/x.jpg") or, for avatars, as a bare file
name. Server paths are resolved against the site's base URL.
"""

from urllib.parse import urljoin

AVATAR_PATH = "/api/files/avatars/"


def _is_absolute(url):
    return url.startswith(('http://', 'https://'))


def resolve_media_url(url, base_url):
    """Resolve a cover or upload URL.

    Absolute http(s) URLs pass through, paths starting with "/" are joined
    to ``base_url`` and anything else is returned unchanged. Empty or None
    gives "".
    """
    if not url:
        return ''
    if _is_absolute(url):
        return url
    if url.startswith('/'):
        return urljoin(base_url, url)
    return url


def resolve_avatar_url(url, base_url):
    """Like resolve_media_url(), but a bare file name maps to the avatar store."""
    if not url:
        return ''
    if _is_absolute(url) or url.startswith('/'):
        return resolve_media_url(url, base_url)
    return urljoin(base_url, AVATAR_PATH + url)


def resolve_cover_url(url, base_url):
    """Resolve a cover preview in the album editor. Only /api paths are joined."""
    if not url:
        return ''
    if url.startswith('/api'):
        return urljoin(base_url, url)
    return url
