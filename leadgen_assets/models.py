"""BusinessProfile and AssetBundle dataclasses: the data shapes on either side of generation."""

from dataclasses import dataclass
from typing import Any

from .errors import GenerationError


TONES = ("professional", "friendly", "bold", "technical")
DEFAULT_TONE = "professional"

CSV_HEADER = (
    "company",
    "contact_name",
    "title",
    "email",
    "personalized_intro",
    "email_variant",
    "cta",
)


@dataclass(frozen=True)
class BusinessProfile:
    business_name: str
    industry: str  # free text, e.g. "Solar", "B2B SaaS", "dental clinics"
    target_audience: str  # e.g. "CA property managers"
    offer: str  # e.g. "Cut bills 30%"
    tone: str = DEFAULT_TONE
    website: str | None = None  # normalised URL
    website_domain: str | None = None  # bare host for copy, e.g. "acmesolar.com"

    @property
    def tone_preset(self) -> str:
        """Tone used for template selection; unknown tones read as professional."""
        return self.tone if self.tone in TONES else DEFAULT_TONE


@dataclass(frozen=True)
class LandingSection:
    title: str
    body: str


@dataclass(frozen=True)
class LandingCopy:
    hero: str
    sections: tuple[LandingSection, ...]


@dataclass(frozen=True)
class OutreachRow:
    company: str
    contact_name: str
    title: str
    email: str
    personalized_intro: str
    email_variant: str
    cta: str

    def as_csv_row(self) -> list[str]:
        return [
            self.company,
            self.contact_name,
            self.title,
            self.email,
            self.personalized_intro,
            self.email_variant,
            self.cta,
        ]


@dataclass(frozen=True)
class AssetBundle:
    icp: str
    value_prop: str
    emails: tuple[str, ...]
    ad_headlines: tuple[str, ...]
    landing: LandingCopy
    discovery_questions: tuple[str, ...]
    call_script_bullets: tuple[str, ...]
    personalized: tuple[OutreachRow, ...]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase JSON shape the UI renders."""
        return {
            "icp": self.icp,
            "valueProp": self.value_prop,
            "emails": list(self.emails),
            "adHeadlines": list(self.ad_headlines),
            "landing": {
                "hero": self.landing.hero,
                "sections": [
                    {"title": s.title, "body": s.body} for s in self.landing.sections
                ],
            },
            "discoveryQuestions": list(self.discovery_questions),
            "callScriptBullets": list(self.call_script_bullets),
            "personalized": [
                {
                    "company": r.company,
                    "contactName": r.contact_name,
                    "title": r.title,
                    "email": r.email,
                    "personalizedIntro": r.personalized_intro,
                    "emailVariant": r.email_variant,
                    "cta": r.cta,
                }
                for r in self.personalized
            ],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "AssetBundle":
        """
        Build a bundle from its camelCase JSON shape, enforcing the output contract.

        Every text field must be a non-blank string and every list must be
        non-empty, whichever backend produced the data. Anything else raises
        GenerationError(reason="invalid_response") so callers never see a
        partial bundle.
        """
        if not isinstance(data, dict):
            raise GenerationError("invalid_response", "bundle is not an object")

        landing = data.get("landing")
        if not isinstance(landing, dict):
            raise GenerationError("invalid_response", "landing is not an object")

        return cls(
            icp=_text(data, "icp"),
            value_prop=_text(data, "valueProp"),
            emails=_text_list(data, "emails"),
            ad_headlines=_text_list(data, "adHeadlines"),
            landing=LandingCopy(
                hero=_text(landing, "hero", "landing.hero"),
                sections=tuple(
                    LandingSection(
                        title=_text(s, "title", f"landing.sections[{i}].title"),
                        body=_text(s, "body", f"landing.sections[{i}].body"),
                    )
                    for i, s in enumerate(_object_list(landing, "sections", "landing.sections"))
                ),
            ),
            discovery_questions=_text_list(data, "discoveryQuestions"),
            call_script_bullets=_text_list(data, "callScriptBullets"),
            personalized=tuple(
                OutreachRow(
                    company=_text(r, "company", f"personalized[{i}].company"),
                    contact_name=_text(r, "contactName", f"personalized[{i}].contactName"),
                    title=_text(r, "title", f"personalized[{i}].title"),
                    email=_text(r, "email", f"personalized[{i}].email"),
                    personalized_intro=_text(r, "personalizedIntro", f"personalized[{i}].personalizedIntro"),
                    email_variant=_text(r, "emailVariant", f"personalized[{i}].emailVariant"),
                    cta=_text(r, "cta", f"personalized[{i}].cta"),
                )
                for i, r in enumerate(_object_list(data, "personalized"))
            ),
        )


def _text(data: dict, key: str, label: str | None = None) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise GenerationError("invalid_response", f"{label or key} must be non-empty text")
    return value.strip()


def _text_list(data: dict, key: str) -> tuple[str, ...]:
    values = data.get(key)
    if not isinstance(values, list) or not values:
        raise GenerationError("invalid_response", f"{key} must be a non-empty list")
    return tuple(_text({key: v}, key, f"{key}[{i}]") for i, v in enumerate(values))


def _object_list(data: dict, key: str, label: str | None = None) -> list[dict]:
    values = data.get(key)
    label = label or key
    if not isinstance(values, list) or not values:
        raise GenerationError("invalid_response", f"{label} must be a non-empty list")
    for i, v in enumerate(values):
        if not isinstance(v, dict):
            raise GenerationError("invalid_response", f"{label}[{i}] is not an object")
    return values
