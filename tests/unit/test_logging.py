"""Tests for logging helpers."""
import logging

import pytest

from wetransferpy import setup_logging
from wetransferpy.core.logging import ROOT_LOGGER_NAME, get_logger
from wetransferpy.core.session import TokenCache


class TestGetLogger:
    """Test suite for get_logger."""

    def test_prefixes_name(self):
        assert get_logger('upload.file').name == 'wetransferpy.upload.file'

    def test_keeps_qualified_name(self):
        assert get_logger('wetransferpy.api').name == 'wetransferpy.api'
        assert get_logger(ROOT_LOGGER_NAME).name == 'wetransferpy'

    def test_propagates(self):
        assert get_logger('session').propagate


class TestSetupLogging:
    """Test suite for setup_logging."""

    def test_sets_level(self):
        setup_logging(logging.DEBUG)

        assert logging.getLogger('wetransferpy.upload.coordinator').level == logging.DEBUG
        setup_logging(logging.WARNING)


class TestTokenNeverLogged:
    """The token value must not reach the logs."""

    def test_token_cache_logs(self, caplog):
        with caplog.at_level(logging.DEBUG, logger='wetransferpy'):
            cache = TokenCache()
            cache.set('secret-jwt')
            cache.get()
            cache.clear()

        assert 'secret-jwt' not in caplog.text

    @pytest.mark.asyncio
    async def test_authorize_logs(self, client, transport, caplog):
        transport.route('POST', r'/authorize$', json_body={'success': True, 'token': 'secret-jwt'})

        with caplog.at_level(logging.DEBUG, logger='wetransferpy'):
            await client.authorize('me@example.com')

        assert 'secret-jwt' not in caplog.text
        assert 'test-key' not in caplog.text
