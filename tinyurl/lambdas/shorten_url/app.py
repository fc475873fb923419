import json
import logging
from typing import Any

from tinyurl.dao.exceptions import DataStoreError
from tinyurl.exceptions import InvalidInputError
from tinyurl.services import build_url_service
from tinyurl.utils import load_config, app_prefix, base_url, validate_long_url
from tinyurl.utils.helpers import guarantee_500_response
from tinyurl.lambdas.responses import response_200, response_400, response_500
from tinyurl.lambdas.shorten_url.constants import (
    INVALID_JSON,
    MISSING_LONG_URL,
    INVALID_LONG_URL,
    INVALID_LIVE_FOREVER,
    STORAGE_FAILURE,
    SHORTEN_SUCCESS,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Handle incoming API Gateway requests to shorten URLs

    This Lambda handler follows this procedure to shorten URLs:
    - Step 1: Extract long URL and live_forever flag from request body
    - Step 2: Generate and persist the tiny URL
    - Step 3: Respond to client with 200 success

    HTTP responses:
        200: Successful URL shortening
            tiny_url: newly generated tiny url
            url_key: newly generated url key
            long_url: original url (provided in request)
            expire_time: ISO-8601 UTC expire time
            live_forever: whether the tiny url practically never expires
        400: Bad client request
            message: invalid JSON, missing or invalid long_url, invalid live_forever
        500: Internal server error
            message: storage failure

    Args:
        event (dict[str, Any]):
            API Gateway event payload in Lambda Proxy format.
        context (Any):
            AWS Lambda context object (not used directly).

    Returns:
        dict[str, Any]:
            API Gateway-compatible response including statusCode, headers, and body.

    Example:
        >>> event = {'body': '{"long_url": "https://example.com"}'}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        200
        >>> json.loads(response['body'])['tiny_url']
        'http://localhost:3000/27qMi57J'
    """
    # 1- Extract long URL from request body
    try:
        request_body = json.loads(event.get('body') or '{}')
    except json.JSONDecodeError:
        logger.info('Invalid JSON body. Responding with 400.', extra={'event': INVALID_JSON})
        return response_400(message='invalid JSON body', error_code=INVALID_JSON)

    if not isinstance(request_body, dict):
        logger.info('JSON body is not an object. Responding with 400.', extra={'event': INVALID_JSON})
        return response_400(message='JSON body must be an object', error_code=INVALID_JSON)

    long_url = request_body.get('long_url')
    if not long_url:
        logger.info('Missing "long_url" in body. Responding with 400.', extra={'event': MISSING_LONG_URL})
        return response_400(message="missing 'long_url' in JSON body", error_code=MISSING_LONG_URL)

    try:
        validate_long_url(long_url)
    except InvalidInputError as e:
        logger.info('Invalid "long_url" in body. Responding with 400.', extra={'event': INVALID_LONG_URL})
        return response_400(message=str(e), error_code=INVALID_LONG_URL)

    live_forever = request_body.get('live_forever', False)
    if not isinstance(live_forever, bool):
        logger.info('Invalid "live_forever" in body. Responding with 400.', extra={'event': INVALID_LIVE_FOREVER})
        return response_400(message="'live_forever' must be a boolean", error_code=INVALID_LIVE_FOREVER)

    # 2- Generate and persist the tiny URL
    try:
        service = build_url_service(load_config('shorten_url'), prefix=app_prefix())
        document = service.generate_tiny_url(long_url, live_forever=live_forever)
    except DataStoreError:
        logger.exception('Failed to store tiny URL. Responding with 500.', extra={'event': STORAGE_FAILURE})
        return response_500(error_code=STORAGE_FAILURE)

    # 3- Respond to client with 200 success
    tiny_url = document.to_url(base_url(event))
    logger.info(
        'Shortened URL. Responding with 200.',
        extra={'urlKey': document.url_key, 'event': SHORTEN_SUCCESS},
    )
    return response_200(
        {
            'message': f'Successfully shortened {long_url} to {tiny_url}',
            'tiny_url': tiny_url,
            'url_key': document.url_key,
            'long_url': document.long_url,
            'expire_time': document.expire_time.isoformat(),
            'live_forever': document.live_forever,
        }
    )
