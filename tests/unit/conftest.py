from urllib.parse import parse_qs

import pytest


@pytest.fixture(scope="function")
def query():
    def _parse(qs: str) -> dict[str, list[str]]:
        return parse_qs(qs.lstrip("?"), keep_blank_values=True)

    return _parse


@pytest.fixture(scope="function")
def filters(query):
    return query("?status=ok&page=2&something=there")
