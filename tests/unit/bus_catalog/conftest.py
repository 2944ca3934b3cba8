from unittest.mock import MagicMock

import pytest

from bus_catalog.trip.infrastructure.in_memory_bus_trip_repository import (
    InMemoryBusTripRepository,
)


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def in_memory_repository():
    """空のインメモリリポジトリ"""
    return InMemoryBusTripRepository()


@pytest.fixture
def lambda_context():
    """Powertools の inject_lambda_context が参照する属性を持つコンテキスト"""
    context = MagicMock()
    context.function_name = "test-function"
    context.memory_limit_in_mb = 128
    context.invoked_function_arn = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:test-function"
    )
    context.aws_request_id = "52fdfc07-2182-154f-163f-5f0f9a621d72"
    return context
