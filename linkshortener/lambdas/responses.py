"""HTTP response builders shared by the handlers

All bodies follow the shape `{"success": bool, ...}` used by the add link route.
"""

import json
from typing import Any

from linkshortener.types import LambdaResponse


def response_200(**payload: Any) -> LambdaResponse:
    return {
        'statusCode': 200,
        'headers': {'Content-Type': 'application/json'},
        'body': json.dumps({'success': True, **payload}),
    }


def response_301(*, location: str) -> LambdaResponse:
    return {
        'statusCode': 301,
        'headers': {'Location': location},
        'body': '',
    }


def response_error(status_code: int, error: str, error_code: str | None = None, headers: dict | None = None) -> LambdaResponse:
    body = {'success': False, 'error': error}
    if error_code:
        body['errorCode'] = error_code
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': 'application/json', **(headers or {})},
        'body': json.dumps(body),
    }
