"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

from kafka_context.models.context import ConfigurationStore, Context, SASLSettings


class FakePrompter:
    """Prompter returning canned answers and recording the questions asked."""

    def __init__(self, texts=None, confirm=False):
        self.texts = dict(texts or {})
        self.confirm_answer = confirm
        self.asked = []

    def text(self, label, hide_input=False, choices=None):
        self.asked.append((label, hide_input))
        return self.texts[label]

    def confirm(self, label, default=False):
        self.asked.append((label, False))
        return self.confirm_answer


@pytest.fixture
def temp_config_path():
    """Path to a context file that does not exist yet."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir) / 'config.yaml'


@pytest.fixture
def dev_context():
    """Stored context with every field set."""
    return Context(
        bootstrap_servers=['b-1.dev:9092', 'b-2.dev:9092'],
        kafka_version='2.8.0',
        schema_registry='http://registry.dev:8081',
        ksql='http://ksql.dev:8088',
        tls=True,
        sasl=SASLSettings(enabled=True, algorithm='SCRAM-SHA-512', username='dev', password='secret')
    )


@pytest.fixture
def sample_store(dev_context):
    """Store holding a current `dev` context and a plain `local` one."""
    return ConfigurationStore(
        contexts={
            'dev': dev_context,
            'local': Context(bootstrap_servers=['localhost:9092'], kafka_version='3.6.0', tls=False)
        },
        current_context='dev'
    )


@pytest.fixture
def mock_connector():
    """Connector standing in for open_connection."""
    connection = MagicMock()
    connection.__enter__.return_value = connection
    connector = MagicMock(return_value=connection)
    connector.connection = connection
    return connector


@pytest.fixture
def fake_prompter():
    """Prompter factory."""
    return FakePrompter
