import pytest
from fastapi.testclient import TestClient

from leadgen_assets.backends import NoBackend
from leadgen_assets.models import BusinessProfile
from leadgen_assets.web import create_app

ACME = {
    "businessName": "Acme Solar",
    "industry": "Solar",
    "targetAudience": "CA property managers",
    "offer": "Cut bills 30%",
    "tone": "bold",
}


@pytest.fixture
def acme_payload():
    return dict(ACME)


@pytest.fixture
def acme_profile():
    return BusinessProfile(
        business_name="Acme Solar",
        industry="Solar",
        target_audience="CA property managers",
        offer="Cut bills 30%",
        tone="bold",
    )


@pytest.fixture
def client():
    return TestClient(create_app(backend=NoBackend()))
