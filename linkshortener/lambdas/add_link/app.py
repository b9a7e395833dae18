import json
import logging

from linkshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from linkshortener.store import LinkStore
from linkshortener.exceptions import ValidationError, DomainMismatchError
from linkshortener.dao.exceptions import StorageWriteError
from linkshortener.utils.config import AppConfig
from linkshortener.utils.helpers import get_short_url, guarantee_500_response
from linkshortener.utils.constants import DEFAULT_ADD_LINK_FIELD
from linkshortener.lambdas.dependencies import resolve
from linkshortener.lambdas.responses import response_200, response_error
from linkshortener.lambdas.constants import (
    INVALID_JSON,
    MISSING_LONG_LINK,
    DOMAIN_MISMATCH,
    STORAGE_WRITE_FAILED,
    LINK_ADDED,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(
    event: LambdaEvent,
    context: LambdaContext,
    *,
    store: LinkStore | None = None,
    config: AppConfig | None = None,
) -> LambdaResponse:
    """Handle incoming POST requests to shorten URLs

    This handler follows this procedure to shorten URLs:
    - Step 1: Extract the long URL from the JSON request body
    - Step 2: Store it under a new short id (validates the allowed domain)
    - Step 3: Respond with the short id and the public short URL

    HTTP responses:
        200: Successful URL shortening
            success: true
            shortId: newly generated short id
            shortUrl: newly generated short url
        400: Bad client request
            error: invalid JSON, missing 'longLink' or URL outside the allowed domain
        500: Internal server error
            error: the links file couldn't be written

    Args:
        event (LambdaEvent):
            API Gateway event payload in Lambda Proxy format.
        context (LambdaContext):
            AWS Lambda context object (not used directly).
        store (LinkStore | None):
            Store to operate on. Built from configuration when omitted.
        config (AppConfig | None):
            Application configuration. Loaded from YAML/environment when omitted.

    Returns:
        LambdaResponse:
            API Gateway-compatible response including statusCode, headers, and body.

    Example:
        >>> event = {'body': '{"longLink": "http://localhost:3000/page1"}'}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        200
        >>> json.loads(response['body'])['shortUrl']
        'http://localhost:3000/share/k3x9q0'
    """
    store, config = resolve(store, config)

    # 1- Extract long URL from request body
    try:
        request_body = json.loads(event.get('body') or '{}')
    except json.JSONDecodeError:
        logger.info('Invalid JSON body. Responding with 400.', extra={'event': INVALID_JSON})
        return response_error(400, 'Bad Request (invalid JSON body)', error_code=INVALID_JSON)

    long_link = request_body.get(DEFAULT_ADD_LINK_FIELD) if isinstance(request_body, dict) else None

    # 2- Store the link under a new short id
    try:
        short_id = store.add_link(long_link)
    except DomainMismatchError as e:
        logger.info('Long URL rejected by domain allowlist. Responding with 400.', extra={'event': DOMAIN_MISMATCH})
        return response_error(400, str(e), error_code=DOMAIN_MISMATCH)
    except ValidationError:
        logger.info(f'Missing "{DEFAULT_ADD_LINK_FIELD}" in body. Responding with 400.', extra={'event': MISSING_LONG_LINK})
        return response_error(400, f'Field "{DEFAULT_ADD_LINK_FIELD}" is required in the request body', error_code=MISSING_LONG_LINK)
    except StorageWriteError:
        logger.exception('Failed to persist new link. Responding with 500.', extra={'event': STORAGE_WRITE_FAILED})
        return response_error(500, 'Internal Server Error', error_code=STORAGE_WRITE_FAILED)

    # 3- Respond with the new short URL
    short_url = get_short_url(short_id, event, base_path=config.http.base_path)
    logger.info('Link added. Responding with 200.', extra={'shortId': short_id, 'event': LINK_ADDED})
    return response_200(shortId=short_id, shortUrl=short_url)
