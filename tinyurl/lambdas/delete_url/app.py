import logging
from typing import Any

from tinyurl.dao.exceptions import DataStoreError, DocumentNotFoundError
from tinyurl.services import build_url_service
from tinyurl.utils import load_config, app_prefix
from tinyurl.utils.helpers import guarantee_500_response
from tinyurl.lambdas.responses import response_204, response_400, response_404, response_500
from tinyurl.lambdas.delete_url.constants import (
    MISSING_URL_KEY,
    TINY_URL_NOT_FOUND,
    STORAGE_FAILURE,
    DELETE_SUCCESS,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Handle incoming API Gateway requests to delete tiny URLs

    HTTP responses:
        204: Tiny URL deleted
        400: Bad client request (missing url key in path parameters)
        404: Tiny URL doesn't exist
        500: Storage failure
    """
    url_key = (event.get('pathParameters') or {}).get('url_key')
    if not url_key:
        logger.info('Missing "url_key" in path. Responding with 400.', extra={'event': MISSING_URL_KEY})
        return response_400(message="missing 'url_key' in path", error_code=MISSING_URL_KEY)

    try:
        service = build_url_service(load_config('delete_url'), prefix=app_prefix())
        service.delete_tiny_url(url_key)
    except DocumentNotFoundError:
        logger.info(
            'Tiny URL not found. Responding with 404.',
            extra={'urlKey': url_key, 'event': TINY_URL_NOT_FOUND},
        )
        return response_404(message=f"url key '{url_key}' doesn't exist", error_code=TINY_URL_NOT_FOUND)
    except DataStoreError:
        logger.exception('Failed to delete tiny URL. Responding with 500.', extra={'urlKey': url_key, 'event': STORAGE_FAILURE})
        return response_500(error_code=STORAGE_FAILURE)

    logger.info('Deleted tiny URL. Responding with 204.', extra={'urlKey': url_key, 'event': DELETE_SUCCESS})
    return response_204()
