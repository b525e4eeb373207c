import pytest

from leadgen_assets.errors import ValidationError
from leadgen_assets.validator import validate_profile


def test_valid_payload(acme_payload):
    profile = validate_profile(acme_payload)
    assert profile.business_name == "Acme Solar"
    assert profile.target_audience == "CA property managers"
    assert profile.tone == "bold"
    assert profile.website is None


def test_profile_is_immutable(acme_payload):
    profile = validate_profile(acme_payload)
    with pytest.raises(AttributeError):
        profile.offer = "something else"


@pytest.mark.parametrize("field", ["businessName", "industry", "targetAudience", "offer"])
def test_missing_required_field(acme_payload, field):
    del acme_payload[field]
    with pytest.raises(ValidationError) as exc:
        validate_profile(acme_payload)
    assert exc.value.fields == [field]
    assert field in str(exc.value)


@pytest.mark.parametrize("value", ["", "   ", None, 42, ["Acme"]])
def test_required_field_must_be_non_empty_string(acme_payload, value):
    acme_payload["businessName"] = value
    with pytest.raises(ValidationError) as exc:
        validate_profile(acme_payload)
    assert exc.value.fields == ["businessName"]


def test_all_offending_fields_are_named():
    with pytest.raises(ValidationError) as exc:
        validate_profile({"industry": "Solar"})
    assert exc.value.fields == ["businessName", "targetAudience", "offer"]


def test_tone_defaults_to_professional(acme_payload):
    del acme_payload["tone"]
    assert validate_profile(acme_payload).tone == "professional"

    acme_payload["tone"] = ""
    assert validate_profile(acme_payload).tone == "professional"


def test_unknown_tone_is_kept_but_uses_professional_templates(acme_payload):
    acme_payload["tone"] = "Playful"
    profile = validate_profile(acme_payload)
    assert profile.tone == "playful"
    assert profile.tone_preset == "professional"


@pytest.mark.parametrize("website", ["", "   ", None])
def test_blank_website_means_none(acme_payload, website):
    acme_payload["website"] = website
    profile = validate_profile(acme_payload)
    assert profile.website is None
    assert profile.website_domain is None


@pytest.mark.parametrize("website,domain", [
    ("https://example.com", "example.com"),
    ("http://acme.io/solar?x=1", "acme.io"),
    ("https://www.acmesolar.com/about", "acmesolar.com"),
    ("HTTPS://AcmeSolar.com/about", "acmesolar.com"),
    ("https://user:pw@acmesolar.com:8443/x", "acmesolar.com"),
])
def test_website_accepted(acme_payload, website, domain):
    acme_payload["website"] = website
    profile = validate_profile(acme_payload)
    assert profile.website.startswith(("http://", "https://"))
    assert profile.website_domain == domain


@pytest.mark.parametrize("website", ["not a url", "example", "ftp://example.com", 42])
def test_website_rejected(acme_payload, website):
    acme_payload["website"] = website
    with pytest.raises(ValidationError) as exc:
        validate_profile(acme_payload)
    assert exc.value.fields == ["website"]


def test_whitespace_is_trimmed(acme_payload):
    acme_payload["offer"] = "  Cut bills 30%  "
    assert validate_profile(acme_payload).offer == "Cut bills 30%"


def test_unknown_keys_ignored(acme_payload):
    acme_payload["extra"] = "ignored"
    assert validate_profile(acme_payload).business_name == "Acme Solar"


@pytest.mark.parametrize("payload", [None, [], "Acme Solar", 3])
def test_payload_must_be_object(payload):
    with pytest.raises(ValidationError) as exc:
        validate_profile(payload)
    assert exc.value.fields == ["body"]


def test_snake_case_keys_are_accepted():
    profile = validate_profile({
        "business_name": "Acme Solar",
        "industry": "Solar",
        "target_audience": "CA property managers",
        "offer": "Cut bills 30%",
    })
    assert profile.target_audience == "CA property managers"


def test_errors_use_camel_case_names(acme_payload):
    acme_payload["targetAudience"] = ""
    with pytest.raises(ValidationError) as exc:
        validate_profile(acme_payload)
    assert exc.value.fields == ["targetAudience"]
