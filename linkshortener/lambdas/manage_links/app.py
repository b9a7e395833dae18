import json
import logging

from linkshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from linkshortener.store import LinkStore
from linkshortener.exceptions import ValidationError, DomainMismatchError
from linkshortener.dao.exceptions import StorageWriteError
from linkshortener.utils.config import AppConfig
from linkshortener.utils.helpers import guarantee_500_response
from linkshortener.utils.constants import DEFAULT_ADD_LINK_FIELD
from linkshortener.lambdas.dependencies import resolve
from linkshortener.lambdas.responses import response_200, response_error
from linkshortener.lambdas.constants import (
    INVALID_JSON,
    MISSING_SHORT_ID,
    INVALID_LONG_LINK,
    DOMAIN_MISMATCH,
    SHORT_ID_NOT_FOUND,
    METHOD_NOT_ALLOWED,
    STORAGE_WRITE_FAILED,
    LINK_UPDATED,
    LINK_REMOVED,
    LINKS_LISTED,
)


logger = logging.getLogger(__name__)

ALLOWED_METHODS = ('GET', 'PUT', 'DELETE')


def _not_found(short_id: str) -> LambdaResponse:
    logger.info('Short id not found. Responding with 404.', extra={'shortId': short_id, 'event': SHORT_ID_NOT_FOUND})
    return response_error(404, f'shortId "{short_id}" not found', error_code=SHORT_ID_NOT_FOUND)


def _storage_failed() -> LambdaResponse:
    logger.exception('Failed to persist links. Responding with 500.', extra={'event': STORAGE_WRITE_FAILED})
    return response_error(500, 'Internal Server Error', error_code=STORAGE_WRITE_FAILED)


def get_links(store: LinkStore, short_id: str | None) -> LambdaResponse:
    if short_id is None:
        links = dict(store.list_all_links())
        logger.info('Listing links. Responding with 200.', extra={'links': len(links), 'event': LINKS_LISTED})
        return response_200(links=links)

    long_link = store.get_long_link(short_id)
    if long_link is None:
        return _not_found(short_id)
    return response_200(shortId=short_id, longLink=long_link)


def update_link(store: LinkStore, short_id: str | None, raw_body: str | None) -> LambdaResponse:
    if short_id is None:
        return response_error(400, "Bad Request (missing 'shortId' in path)", error_code=MISSING_SHORT_ID)

    try:
        request_body = json.loads(raw_body or '{}')
    except json.JSONDecodeError:
        return response_error(400, 'Bad Request (invalid JSON body)', error_code=INVALID_JSON)
    new_long_link = request_body.get(DEFAULT_ADD_LINK_FIELD) if isinstance(request_body, dict) else None

    try:
        updated = store.update_link(short_id, new_long_link)
    except DomainMismatchError as e:
        logger.info('Long URL rejected by domain allowlist. Responding with 400.', extra={'shortId': short_id, 'event': DOMAIN_MISMATCH})
        return response_error(400, str(e), error_code=DOMAIN_MISMATCH)
    except ValidationError as e:
        return response_error(400, str(e), error_code=INVALID_LONG_LINK)
    except StorageWriteError:
        return _storage_failed()

    if not updated:
        return _not_found(short_id)

    logger.info('Link updated. Responding with 200.', extra={'shortId': short_id, 'event': LINK_UPDATED})
    return response_200(shortId=short_id, longLink=new_long_link)


def remove_link(store: LinkStore, short_id: str | None) -> LambdaResponse:
    if short_id is None:
        return response_error(400, "Bad Request (missing 'shortId' in path)", error_code=MISSING_SHORT_ID)

    try:
        removed = store.remove_link(short_id)
    except StorageWriteError:
        return _storage_failed()

    if not removed:
        return _not_found(short_id)

    logger.info('Link removed. Responding with 200.', extra={'shortId': short_id, 'event': LINK_REMOVED})
    return response_200(shortId=short_id)


@guarantee_500_response
def lambda_handler(
    event: LambdaEvent,
    context: LambdaContext,
    *,
    store: LinkStore | None = None,
    config: AppConfig | None = None,
) -> LambdaResponse:
    """Handle link management requests

    Routes:
        GET    /api/links               -> list all links
        GET    /api/links/{shortId}     -> look one link up
        PUT    /api/links/{shortId}     -> point the link at body's "longLink"
        DELETE /api/links/{shortId}     -> remove the link

    HTTP responses:
        200: Success (body carries `links`, or `shortId`/`longLink`)
        400: Missing shortId, invalid JSON, missing/invalid "longLink" or domain mismatch
        404: Unknown shortId
        405: Any other HTTP method
        500: The links file couldn't be written

    Example:
        >>> event = {'httpMethod': 'DELETE', 'pathParameters': {'shortId': 'k3x9q0'}}
        >>> lambda_handler(event, None)['statusCode']
        200
    """
    store, _ = resolve(store, config)

    method = (event.get('httpMethod') or '').upper()
    short_id = (event.get('pathParameters') or {}).get('shortId') or None

    if method == 'GET':
        return get_links(store, short_id)
    if method == 'PUT':
        return update_link(store, short_id, event.get('body'))
    if method == 'DELETE':
        return remove_link(store, short_id)

    logger.info('Unsupported method. Responding with 405.', extra={'method': method, 'event': METHOD_NOT_ALLOWED})
    return response_error(405, f'Method {method or "<none>"} not allowed', error_code=METHOD_NOT_ALLOWED, headers={'Allow': ', '.join(ALLOWED_METHODS)})
