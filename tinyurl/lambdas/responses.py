"""API Gateway (Lambda Proxy) response builders shared by the handlers"""

import json
from typing import Any


JSON_HEADERS = {'Content-Type': 'application/json'}


def response_200(body: dict[str, Any]) -> dict:
    return {
        'statusCode': 200,
        'headers': dict(JSON_HEADERS),
        'body': json.dumps(body),
    }


def response_204() -> dict:
    return {
        'statusCode': 204,
        'body': '',
    }


def response_302(*, location: str) -> dict:
    return {
        'statusCode': 302,
        'headers': {'Location': location},
        'body': json.dumps({}),  # no body needed for redirects
    }


def response_400(message: str | None = None, error_code: str | None = None) -> dict:
    base = 'Bad Request'
    body = {'message': base if not message else f'{base} ({message})'}
    if error_code:
        body['errorCode'] = error_code
    return {
        'statusCode': 400,
        'headers': dict(JSON_HEADERS),
        'body': json.dumps(body),
    }


def response_404(message: str | None = None, error_code: str | None = None) -> dict:
    base = 'Not Found'
    body = {'message': base if not message else f'{base} ({message})'}
    if error_code:
        body['errorCode'] = error_code
    return {
        'statusCode': 404,
        'headers': dict(JSON_HEADERS),
        'body': json.dumps(body),
    }


def response_500(message: str | None = None, error_code: str | None = None) -> dict:
    base = 'Internal Server Error'
    body = {'message': base if not message else f'{base} ({message})'}
    if error_code:
        body['errorCode'] = error_code
    return {
        'statusCode': 500,
        'headers': dict(JSON_HEADERS),
        'body': json.dumps(body),
    }
