"""Unit tests for JSON logging in logging.py."""

import sys
import json
import logging
from datetime import datetime, UTC

from freezegun import freeze_time

from tinyurl.utils.constants import ENV
from tinyurl.utils.logging import JsonFormatter, initialize_logging


def make_record(msg: str = 'Cache hit.', level: int = logging.INFO, **extra) -> logging.LogRecord:
    logger = logging.getLogger('tinyurl.test')
    return logger.makeRecord('tinyurl.test', level, __file__, 1, msg, (), None, extra=extra)


@freeze_time('2025-12-26 12:00:00')
def test_json_formatter_base_fields():
    record = make_record()

    log = json.loads(JsonFormatter().format(record))

    assert log['timestamp'] == '2025-12-26T12:00:00.000Z'
    assert log['level'] == 'INFO'
    assert log['logger'] == 'tinyurl.test'
    assert log['message'] == 'Cache hit.'


def test_json_formatter_includes_extras():
    record = make_record(urlKey='27qMi57J', attempt=2)

    log = json.loads(JsonFormatter().format(record))

    assert log['urlKey'] == '27qMi57J'
    assert log['attempt'] == 2
    assert 'lineno' not in log
    assert 'args' not in log


def test_json_formatter_serializes_non_json_extras():
    expire_time = datetime(2026, 10, 15, tzinfo=UTC)
    record = make_record(expireTime=expire_time)

    log = json.loads(JsonFormatter().format(record))

    assert log['expireTime'] == str(expire_time)


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError('boom')
    except RuntimeError:
        logger = logging.getLogger('tinyurl.test')
        record = logger.makeRecord('tinyurl.test', logging.ERROR, __file__, 1, 'Failed.', (), exc_info=sys.exc_info())

    log = json.loads(JsonFormatter().format(record))

    assert 'RuntimeError: boom' in log['exception']


def test_initialize_logging_sets_level(monkeypatch):
    monkeypatch.setenv(ENV.App.LOG_LEVEL, 'debug')

    initialize_logging()

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(handler.formatter, JsonFormatter) for handler in root.handlers)


@freeze_time('2025-12-26 12:00:00')
def test_json_formatter_handler_event_record():
    logger = logging.getLogger('tinyurl.lambdas.redirect_url.app')
    record = logger.makeRecord(
        logger.name,
        logging.INFO,
        __file__,
        1,
        'Tiny URL not found. Responding with 404.',
        (),
        None,
        extra={'urlKey': '27qMi57J', 'event': 'TINY_URL_NOT_FOUND'},
    )

    log = json.loads(JsonFormatter().format(record))

    assert log == {
        'timestamp': '2025-12-26T12:00:00.000Z',
        'level': 'INFO',
        'logger': 'tinyurl.lambdas.redirect_url.app',
        'message': 'Tiny URL not found. Responding with 404.',
        'urlKey': '27qMi57J',
        'event': 'TINY_URL_NOT_FOUND',
    }
