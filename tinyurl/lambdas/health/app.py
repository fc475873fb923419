from typing import Any

from tinyurl.lambdas.responses import response_200
from tinyurl.lambdas.health.constants import HEALTHY


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Liveness probe: respond with 200 without touching the store or cache"""
    return response_200({'status': HEALTHY})
