import logging

import pytest

from data.api_data import FAKESTORE_BASE_URL, JSONPLACEHOLDER_BASE_URL

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Accept": "application/json"}


def _request_context(playwright_instance, base_url: str):
    context = playwright_instance.request.new_context(base_url=base_url, extra_http_headers=JSON_HEADERS)
    logger.info("api context -> %s", base_url)
    return context


@pytest.fixture(scope="session")
def jsonplaceholder_api(playwright_instance):
    """JSONPlaceholder 的 APIRequestContext，session 内复用"""
    context = _request_context(playwright_instance, JSONPLACEHOLDER_BASE_URL)
    yield context
    context.dispose()


@pytest.fixture(scope="session")
def fakestore_api(playwright_instance):
    context = _request_context(playwright_instance, FAKESTORE_BASE_URL)
    yield context
    context.dispose()
