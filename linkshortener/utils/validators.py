"""URL validation helpers

Functions:
    require_long_url(long_url) -> str
        Ensure a long URL was supplied at all.
    url_host(url) -> str
        Return the `host[:port]` of an absolute URL.
    validate_domain(url, allowed_domain) -> str
        Ensure the URL's host is exactly the allowed domain.

Example:
    >>> validate_domain('http://localhost:3000/page1', 'localhost:3000')
    'http://localhost:3000/page1'
    >>> validate_domain('http://other.com/x', 'example.com')
    Traceback (most recent call last):
        ...
    linkshortener.exceptions.DomainMismatchError: Link must be from domain "example.com". Got: other.com
"""

from typing import Any
from urllib.parse import urlsplit

from linkshortener.exceptions import ValidationError, DomainMismatchError


DEFAULT_PORTS = {'http': 80, 'https': 443, 'ws': 80, 'wss': 443, 'ftp': 21}


def require_long_url(long_url: Any, field: str = 'longLink') -> str:
    """Ensure a long URL was supplied

    Args:
        long_url (Any): value received from the caller
        field (str): name of the input, used in the error message

    Returns:
        str: the URL, unchanged

    Raises:
        ValidationError: if the value is missing, not a string or blank
    """
    if not isinstance(long_url, str) or not long_url.strip():
        raise ValidationError(f'Field "{field}" is required')
    return long_url


def _ascii_host(host: str) -> str:
    # Internationalized names compare in their punycode form, e.g. 'xn--exmple-cua.com'
    if host.isascii():
        return host
    try:
        return host.encode('idna').decode('ascii')
    except UnicodeError as e:
        raise DomainMismatchError(f'Invalid host: {host}') from e


def url_host(url: str) -> str:
    """Return the host of an absolute URL, including a non-default port

    The host is lowercased, user info is dropped and the port is kept only when
    it differs from the scheme's default one, e.g. 'http://Me@Example.com:80/x'
    gives 'example.com' and 'http://localhost:3000/' gives 'localhost:3000'.
    Internationalized hosts are returned punycode-encoded ('http://exämple.com/'
    gives 'xn--exmple-cua.com').

    URLs containing a backslash are rejected: browsers read it as a path
    separator while `urlsplit` keeps it in the user info, so
    'http://evil.com\\@example.com/' would otherwise pass as 'example.com'.

    Raises:
        DomainMismatchError: if the URL has no scheme, no host, a bad port or a backslash
    """
    if '\\' in url:
        raise DomainMismatchError(f'Invalid URL: {url}')

    try:
        components = urlsplit(url)
        port = components.port
    except ValueError as e:
        raise DomainMismatchError(f'Invalid URL: {url}') from e

    hostname = components.hostname
    if not components.scheme or not hostname:
        raise DomainMismatchError(f'Invalid URL: {url}')

    hostname = _ascii_host(hostname)
    if ':' in hostname:  # IPv6 literal
        hostname = f'[{hostname}]'
    if port is not None and port != DEFAULT_PORTS.get(components.scheme.lower()):
        return f'{hostname}:{port}'
    return hostname


def validate_domain(url: str, allowed_domain: str | None) -> str:
    """Ensure the URL's host equals the allowed domain

    A `None` allowed domain disables the check.

    Returns:
        str: the URL, unchanged

    Raises:
        DomainMismatchError: if the URL is malformed or its host differs
    """
    if allowed_domain is None:
        return url

    host = url_host(url)
    if host != _ascii_host(allowed_domain.lower()):
        raise DomainMismatchError(f'Link must be from domain "{allowed_domain}". Got: {host}')
    return url
