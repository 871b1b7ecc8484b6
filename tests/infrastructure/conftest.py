"""Fixtures for the Supabase adapters: a chainable client mock."""

from unittest.mock import Mock

import pytest


@pytest.fixture
def table_mock():
    """Query builder whose filter methods all return the builder itself."""
    table = Mock()
    for name in ("select", "insert", "upsert", "delete", "eq", "single", "order", "limit"):
        getattr(table, name).return_value = table
    table.execute.return_value = Mock(data=[])
    return table


@pytest.fixture
def mock_supabase_client(table_mock):
    client = Mock()
    client.table.return_value = table_mock
    client.rpc.return_value = table_mock
    return client
