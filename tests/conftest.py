import pytest
from fastapi.testclient import TestClient

from mindset_server.app import create_app
from mindset_server.config import ServerSettings

from helpers.fakes import StaticGenerator


@pytest.fixture
def settings():
    """Settings without an API key and with uncompressed PDF output."""
    return ServerSettings(report_page_compression=False)


@pytest.fixture
def generator():
    return StaticGenerator()


@pytest.fixture
def app(settings, generator):
    return create_app(settings, generator=generator)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def sample_responses():
    return {
        "q1_risk_tolerance": "I take calculated risks",
        "q2_hours_per_week": 40,
        "q3_motivations": ["independence", "impact"],
        "q4_experience": {"years": 3, "industry": "retail"},
    }
