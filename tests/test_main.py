import pytest

from leadgen_assets.errors import ValidationError
from leadgen_assets.main import build_assets


def test_build_assets_reports_progress(acme_payload):
    steps = []
    bundle = build_assets(acme_payload, on_progress=steps.append)
    assert bundle.personalized
    assert steps == ["Validating business profile...", "Generating assets for Acme Solar..."]


def test_build_assets_stops_at_validation():
    steps = []
    with pytest.raises(ValidationError):
        build_assets({"businessName": "Acme Solar"}, on_progress=steps.append)
    assert steps == ["Validating business profile..."]
