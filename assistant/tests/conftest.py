"""
Shared fixtures for the assistant tests.
"""

import pytest

from albait.config import AssistantConfig
from assistant.services.catalog import load_catalog
from assistant.services.engine import SearchEngine
from assistant.services.query_preprocessor import QueryPreprocessor
from assistant.services.session import SessionContext


@pytest.fixture(scope="session")
def assistant_settings():
    return AssistantConfig(catalog_path=None)


@pytest.fixture(scope="session")
def catalog():
    return load_catalog()


@pytest.fixture
def preprocessor():
    return QueryPreprocessor()


@pytest.fixture
def session():
    return SessionContext()


@pytest.fixture
def engine(catalog, assistant_settings):
    return SearchEngine(catalog=catalog, settings=assistant_settings)
