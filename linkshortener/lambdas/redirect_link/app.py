import logging

from linkshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from linkshortener.store import LinkStore
from linkshortener.utils.config import AppConfig
from linkshortener.utils.helpers import guarantee_500_response
from linkshortener.lambdas.dependencies import resolve
from linkshortener.lambdas.responses import response_301, response_error
from linkshortener.lambdas.constants import MISSING_SHORT_ID, SHORT_ID_NOT_FOUND, REDIRECT_SUCCESS


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(
    event: LambdaEvent,
    context: LambdaContext,
    *,
    store: LinkStore | None = None,
    config: AppConfig | None = None,
) -> LambdaResponse:
    """Handle incoming GET /share/{shortId} requests

    HTTP responses:
        301: Permanent redirect
            headers:
                Location: long URL destination
        400: Bad client request
            error: missing shortId in path parameters
        404: Not found
            error: the short id is unknown

    Example:
        >>> event = {'pathParameters': {'shortId': 'k3x9q0'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        301
        >>> response['headers']['Location']
        'http://localhost:3000/page1'
    """
    store, _ = resolve(store, config)

    # 1- Extract short id from request's path
    short_id = (event.get('pathParameters') or {}).get('shortId')
    if not short_id:
        logger.info('Missing "shortId" in path. Responding with 400.', extra={'event': MISSING_SHORT_ID})
        return response_error(400, "Bad Request (missing 'shortId' in path)", error_code=MISSING_SHORT_ID)

    # 2- Look the link up
    long_link = store.get_long_link(short_id)
    if long_link is None:
        logger.info('Short id not found. Responding with 404.', extra={'shortId': short_id, 'event': SHORT_ID_NOT_FOUND})
        return response_error(404, 'Short link not found', error_code=SHORT_ID_NOT_FOUND)

    # 3- Redirect client to long URL
    logger.info('Redirecting client to long URL. Responding with 301.', extra={'shortId': short_id, 'event': REDIRECT_SUCCESS})
    return response_301(location=long_link)
