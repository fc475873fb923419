import logging
from typing import Any

from tinyurl.dao.exceptions import DataStoreError, DocumentNotFoundError
from tinyurl.services import build_url_service
from tinyurl.utils import load_config, app_prefix, base_url
from tinyurl.utils.helpers import guarantee_500_response
from tinyurl.lambdas.responses import response_302, response_400, response_404, response_500
from tinyurl.lambdas.redirect_url.constants import (
    MISSING_URL_KEY,
    TINY_URL_NOT_FOUND,
    STORAGE_FAILURE,
    REDIRECT_SUCCESS,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Handle incoming API Gateway requests to redirect tiny URLs

    This Lambda handler follows this procedure to redirect URLs:
    - Step 1: Extract url key from request path
    - Step 2: Resolve the URL document (cache first, then store)
    - Step 3: Redirect client to the long URL

    HTTP responses:
        302: Successful redirect
            headers:
                Location: long URL
        400: Bad client request
            message: missing url key in path parameters
        404: Not found
            message: tiny URL doesn't exist or has expired
        500: Internal server error
            message: storage failure

    Example:
        >>> event = {'pathParameters': {'url_key': '27qMi57J'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        302
        >>> response['headers']['Location']
        'https://example.com/my-page'
    """
    # 1- Extract url key from request's path
    url_key = (event.get('pathParameters') or {}).get('url_key')
    if not url_key:
        logger.info('Missing "url_key" in path. Responding with 400.', extra={'event': MISSING_URL_KEY})
        return response_400(message="missing 'url_key' in path", error_code=MISSING_URL_KEY)

    # 2- Resolve the URL document
    try:
        service = build_url_service(load_config('redirect_url'), prefix=app_prefix())
        document = service.get_tiny_url(url_key)
    except DocumentNotFoundError:
        logger.info(
            'Tiny URL not found. Responding with 404.',
            extra={'urlKey': url_key, 'event': TINY_URL_NOT_FOUND},
        )
        return response_404(message=f"tiny url {base_url(event)}/{url_key} doesn't exist", error_code=TINY_URL_NOT_FOUND)
    except DataStoreError:
        logger.exception('Failed to resolve tiny URL. Responding with 500.', extra={'urlKey': url_key, 'event': STORAGE_FAILURE})
        return response_500(error_code=STORAGE_FAILURE)

    # 3- Redirect client to the long URL
    logger.info(
        'Redirecting client to long URL. Responding with 302.',
        extra={'urlKey': url_key, 'event': REDIRECT_SUCCESS},
    )
    return response_302(location=document.long_url)
