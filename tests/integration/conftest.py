import os
from typing import Generator

import pytest
from dotenv import load_dotenv
from fastapi.testclient import TestClient

load_dotenv(".env.test", override=True)


def _apply_test_env() -> None:
    os.environ.setdefault("TESTING", "1")
    os.environ.setdefault("PAGE_LEN", "5")
    os.environ.setdefault("MAX_PAGE_LEN", "100")


_apply_test_env()

from reportpager.main import app


@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c
