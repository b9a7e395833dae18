"""Unit tests for logging initialization in logging.py

Test coverage includes:

1. JsonFormatter
   - Emits timestamp/level/logger/message as one JSON object.
   - Attaches `extra` fields and skips standard LogRecord attributes.
   - Includes formatted exceptions.

2. initialize_logging()
   - Installs a JSON stdout handler on the root logger at the requested level.
"""

import sys
import json
import logging

import pytest
from freezegun import freeze_time

from linkshortener.utils.logging import JsonFormatter, initialize_logging


def _record(msg='Link added.', level=logging.INFO, exc_info=None, **extra) -> logging.LogRecord:
    record = logging.LogRecord('linkshortener.store', level, __file__, 42, msg, None, exc_info)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


# -------------------------------
# 1. JsonFormatter
# -------------------------------


@freeze_time('2026-10-17 12:00:00')
def test_json_formatter_base_fields():
    log = json.loads(JsonFormatter().format(_record()))

    assert log == {
        'timestamp': '2026-10-17T12:00:00.000Z',
        'level': 'INFO',
        'logger': 'linkshortener.store',
        'message': 'Link added.',
    }


def test_json_formatter_includes_extra_fields():
    log = json.loads(JsonFormatter().format(_record(shortId='k3x9q0', links=3)))

    assert log['shortId'] == 'k3x9q0'
    assert log['links'] == 3
    assert 'lineno' not in log
    assert 'pathname' not in log


def test_json_formatter_includes_exception():
    try:
        raise ValueError('boom')
    except ValueError:
        record = _record(msg='Failed.', level=logging.ERROR, exc_info=sys.exc_info())

    log = json.loads(JsonFormatter().format(record))

    assert log['level'] == 'ERROR'
    assert 'ValueError: boom' in log['exception']


def test_json_formatter_skips_every_logrecord_attribute():
    log = json.loads(JsonFormatter().format(_record(shortId='k3x9q0')))

    assert set(log) == {'timestamp', 'level', 'logger', 'message', 'shortId'}


def test_json_formatter_serializes_unknown_types():
    log = json.loads(JsonFormatter().format(_record(path=object())))
    assert log['path'].startswith('<object object at')


# -------------------------------
# 2. initialize_logging()
# -------------------------------


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.parametrize('level, expected', [('debug', logging.DEBUG), ('WARNING', logging.WARNING)])
def test_initialize_logging(restore_root_logger, level, expected):
    initialize_logging(level)

    assert restore_root_logger.level == expected
    assert any(isinstance(h.formatter, JsonFormatter) for h in restore_root_logger.handlers)


def test_initialize_logging_from_environment(restore_root_logger, monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'error')

    initialize_logging()

    assert restore_root_logger.level == logging.ERROR
