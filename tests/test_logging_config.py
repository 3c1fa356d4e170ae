import logging

from tranzakt.logging_config import _sanitize, configure_logging, logger, redact_headers


def test_redact_headers_drops_credentials():
    headers = {
        "Authorization": "Bearer sk",
        "X-API-Key": "sk",
        "Accept": "application/json",
    }

    assert redact_headers(headers) == {"Accept": "application/json"}


def test_sanitize_strips_secret_like_keys():
    payload = {
        "title": "Dues",
        "secretKey": "sk",
        "nested": [{"password": "p", "amount": 10}],
        "blob": b"\x00\x01",
    }

    assert _sanitize(payload) == {
        "title": "Dues",
        "nested": [{"amount": 10}],
        "blob": "<binary 2 bytes>",
    }


def test_configure_logging_attaches_stdout_handler():
    before = list(logger.handlers)
    try:
        configure_logging(logging.DEBUG)
        added = [h for h in logger.handlers if h not in before]
        assert len(added) == 1
        assert isinstance(added[0], logging.StreamHandler)
        assert logger.level == logging.DEBUG
    finally:
        for handler in logger.handlers[:]:
            if handler not in before:
                logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
