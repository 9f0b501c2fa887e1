"""URL validation helpers

Functions:
    is_valid_url(url) -> bool
        True if `url` (with `https://` assumed when no scheme is given) is an
        absolute http(s) URL.
    normalize_url(url) -> str
        Prefix `https://` when `url` has no http(s) scheme.

Example:
    >>> is_valid_url('example.com/page')
    True
    >>> is_valid_url('not a url')
    False
    >>> normalize_url('example.com')
    'https://example.com'
"""

import urllib.parse


SCHEMES = ('http://', 'https://')

# Code points a host may not contain once percent-decoded (besides C0 controls, space and DEL)
FORBIDDEN_HOST_CHARS = frozenset('#%/:<>?@[\\]^|')


def normalize_url(url: str) -> str:
    return url if url.startswith(SCHEMES) else f'https://{url}'


def is_valid_url(url: str) -> bool:
    """Check that `url` is an absolute http(s) URL

    A missing scheme is replaced with `https://` before parsing.

    Args:
        url (str): raw URL as submitted by the user

    Returns:
        bool: True if the URL parses with an http(s) scheme and a host free of
              forbidden host characters (after percent-decoding).
    """
    if not url or not isinstance(url, str):
        return False

    try:
        components = urllib.parse.urlsplit(normalize_url(url))
        # Accessing .port validates the port component
        components.port
    except ValueError:
        return False

    if components.scheme not in {'http', 'https'}:
        return False
    if not components.hostname or any(char.isspace() for char in components.netloc):
        return False
    return _is_valid_host(components)


def _is_valid_host(components: urllib.parse.SplitResult) -> bool:
    # IPv6 literals were already validated by urlsplit
    if components.netloc.rpartition('@')[2].startswith('['):
        return True
    host = urllib.parse.unquote(components.hostname)
    return not any(char in FORBIDDEN_HOST_CHARS or ord(char) <= 0x20 or ord(char) == 0x7F for char in host)
