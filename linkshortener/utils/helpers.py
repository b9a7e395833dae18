"""Helper utilities for the request handlers.

Functions:
    base_url() -> str
        Extract correct public base URL from API Gateway event
    get_short_url() -> str
        Get string representation of short URL for a given short id
    guarantee_500_response(func) -> Callable
        Decorator: turn any unexpected handler exception into an HTTP 500 response

Example:
    Typical usage inside a handler:

        >>> from linkshortener.utils.helpers import base_url
        >>> event = {
        ...     "requestContext": {
        ...         "domainName": "abc123.execute-api.us-east-1.amazonaws.com",
        ...         "stage": "Prod"
        ...     }
        ... }
        >>> base_url(event)
        'https://abc123.execute-api.us-east-1.amazonaws.com/Prod'

        >>> base_url({})
        'http://localhost:3000'
"""

import json
import logging
import functools
from collections.abc import Callable

from linkshortener.types import LambdaEvent
from linkshortener.utils.constants import DEFAULT_BASE_PATH, LOCAL_BASE_URL


logger = logging.getLogger(__name__)


def base_url(event: LambdaEvent) -> str:
    """Extract public base URL from API Gateway event

    If a custom domain is configured, the stage name is omitted.
    If using the default AWS execute-api domain, the stage name is included.

    Args:
        event (dict): API Gateway event object passed to the handler

    Returns:
        str: Base URL, e.g.:
             - "https://sho.rt"
             - "https://abc123.execute-api.us-east-1.amazonaws.com/Prod"
    """
    request_context = event.get('requestContext') or {}
    domain = request_context.get('domainName', '')
    stage = request_context.get('stage', '')

    if domain and 'execute-api' not in domain:
        # If the domain is a custom domain (no execute-api), skip stage
        return f'https://{domain}'
    elif domain:
        # Otherwise include the stage (for AWS default domains)
        return f'https://{domain}/{stage}'
    else:
        # Fallback: local invocation (tests, CLI, etc.)
        return LOCAL_BASE_URL


def get_short_url(short_id: str, event: LambdaEvent, base_path: str = DEFAULT_BASE_PATH) -> str:
    """Get string representation of shortened URL

    Args:
        short_id (str): short id
        event (dict): API Gateway event object passed to the handler
        base_path (str): prefix under which short links are served

    Returns:
        str: short url string representation, e.g. 'http://localhost:3000/share/k3x9q0'
    """
    prefix = base_path.strip('/')
    parts = [base_url(event).rstrip('/')] + ([prefix] if prefix else []) + [short_id]
    return '/'.join(parts)


def guarantee_500_response(func: Callable) -> Callable:
    """Decorator: respond with HTTP 500 instead of raising from a handler

    Example:
        >>> @guarantee_500_response
        ... def lambda_handler(event, context):
        ...     raise RuntimeError('boom')
        >>> lambda_handler({}, None)['statusCode']
        500
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> dict:
        try:
            return func(*args, **kwargs)
        except Exception:
            logger.exception('Unhandled exception in handler. Responding with 500.', extra={'handler': func.__module__})
            return {
                'statusCode': 500,
                'body': json.dumps({'success': False, 'error': 'Internal Server Error'}),
            }

    return wrapper
