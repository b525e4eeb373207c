"""Text backends: deterministic templates, or Claude via the Anthropic API."""

import json
import logging
import re
from abc import ABC, abstractmethod

import anthropic
import httpx

from .config import CONNECT_TIMEOUT, Settings
from .errors import GenerationError
from .models import BusinessProfile, TONES
from .templates import render_bundle

logger = logging.getLogger(__name__)


class TextBackend(ABC):
    name = "abstract"

    @abstractmethod
    def draft(self, profile: BusinessProfile) -> dict:
        """Return the raw camelCase bundle for a profile. Shape is checked by the caller."""


class NoBackend(TextBackend):
    """Fixed templates. Same profile in, same bundle out."""

    name = "templates"

    def draft(self, profile: BusinessProfile) -> dict:
        return render_bundle(profile)


SYSTEM_PROMPT = (
    "You are a B2B lead-generation copywriter. Given a business profile, write a "
    "complete outbound marketing kit for it.\n\n"
    "Respond with JSON only, no other text.\n\n"
    "Format:\n"
    "{\n"
    '  "icp": "ideal customer profile: segment, who they are, pain points, buying triggers, where to find them",\n'
    '  "valueProp": "1-2 sentence value proposition",\n'
    '  "emails": ["3 cold email variants, each starting with a \'Subject: ...\' line"],\n'
    '  "adHeadlines": ["5 ad headlines, under 60 characters each"],\n'
    '  "landing": {"hero": "hero headline and subline", "sections": [{"title": "...", "body": "..."}]},\n'
    '  "discoveryQuestions": ["5-8 discovery call questions"],\n'
    '  "callScriptBullets": ["5-8 cold call script bullets"],\n'
    '  "personalized": [{"company": "...", "contactName": "...", "title": "...", "email": "...", '
    '"personalizedIntro": "...", "emailVariant": "...", "cta": "..."}]\n'
    "}\n\n"
    "EMAILS: use {{first_name}} as the recipient placeholder.\n\n"
    "PERSONALIZED: 3 sample outreach rows for mail merge. Use the business name followed by "
    "'prospect N' as the company, plausible contact names and titles for the target audience, "
    "and @example.com email addresses. emailVariant holds the full personalized email.\n\n"
    "Every list must contain at least one item. Do not invent statistics beyond the offer."
)

TONE_GUIDANCE = {
    "professional": "Polished and credible. Clear, businesslike sentences.",
    "friendly": "Warm and conversational. Casual greetings, short sentences.",
    "bold": "Confident and punchy. Short declarative sentences, strong claims grounded in the offer.",
    "technical": "Precise and specific. Emphasise measurable outcomes, specs and process.",
}


def build_prompt(profile: BusinessProfile) -> str:
    """User message for the model; tone goes in as an explicit writing instruction."""
    lines = [
        f"Business name: {profile.business_name}",
        f"Industry: {profile.industry}",
        f"Target audience: {profile.target_audience}",
        f"Core offer: {profile.offer}",
        f"Tone: {profile.tone}",
    ]
    if profile.website:
        lines.append(f"Website: {profile.website}")
    lines.append("")
    lines.append(f"Writing style: {TONE_GUIDANCE[profile.tone_preset]}")
    if profile.tone not in TONES:
        lines.append(f"Blend in the requested tone: {profile.tone}.")
    return "\n".join(lines)


def _extract_json(text: str) -> dict:
    # Extract JSON, nested arrays/objects included
    json_match = re.search(r"\{.*\}", text, re.DOTALL)
    if json_match:
        text = json_match.group()
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise GenerationError("invalid_response", f"model reply is not JSON ({e.msg})") from None


class RemoteBackend(TextBackend):
    """
    One Messages API call per generation. settings.timeout caps each read
    and write on the connection; connecting is capped at CONNECT_TIMEOUT.

    No retries: a timeout or API failure becomes a GenerationError.
    """

    name = "anthropic"

    def __init__(self, settings: Settings, client: anthropic.Anthropic | None = None):
        if client is None:
            if not settings.anthropic_api_key:
                raise ValueError("ANTHROPIC_API_KEY not set.")
            client = anthropic.Anthropic(
                api_key=settings.anthropic_api_key,
                timeout=httpx.Timeout(
                    settings.timeout,
                    connect=min(settings.timeout, CONNECT_TIMEOUT),
                ),
                max_retries=0,
            )
        self._client = client
        self.model = settings.model
        self.max_tokens = settings.max_tokens

    def draft(self, profile: BusinessProfile) -> dict:
        try:
            response = self._client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": build_prompt(profile)}],
            )
        except anthropic.APITimeoutError:
            logger.warning("Anthropic request timed out for %r", profile.business_name)
            raise GenerationError("timeout") from None
        except anthropic.APIError as e:
            logger.warning("Anthropic request failed: %s", e)
            raise GenerationError("backend_unavailable", str(e)) from None

        blocks = [b for b in response.content if getattr(b, "type", None) == "text"]
        if not blocks:
            raise GenerationError("invalid_response", "model reply has no text")

        logger.debug(
            "Anthropic usage: input=%s output=%s",
            response.usage.input_tokens,
            response.usage.output_tokens,
        )
        return _extract_json(blocks[0].text.strip())


def select_backend(settings: Settings) -> TextBackend:
    """Pick the backend once at startup: Claude if a key is configured, else templates."""
    if settings.has_backend:
        logger.info("Using Anthropic backend (model=%s, timeout=%ss)", settings.model, settings.timeout)
        return RemoteBackend(settings)
    logger.info("ANTHROPIC_API_KEY not set; using deterministic templates")
    return NoBackend()
