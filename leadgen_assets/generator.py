"""Asset generation: BusinessProfile -> AssetBundle through a TextBackend."""

import logging

from .backends import NoBackend, TextBackend
from .models import AssetBundle, BusinessProfile

logger = logging.getLogger(__name__)


def generate_assets(profile: BusinessProfile, backend: TextBackend | None = None) -> AssetBundle:
    """
    Generate the full asset bundle for a validated profile.

    The same shape contract applies whichever backend drafts the copy: every
    text field non-blank, every list non-empty. A backend that times out,
    fails, or returns something unusable raises GenerationError; no partial
    bundle is ever returned.

    Args:
        profile: Validated business profile
        backend: Text backend (default: deterministic templates)

    Returns:
        AssetBundle
    """
    backend = backend or NoBackend()
    logger.info("Generating assets for %r via %s", profile.business_name, backend.name)

    raw = backend.draft(profile)
    bundle = AssetBundle.from_dict(raw)

    logger.debug(
        "Generated %d emails, %d headlines, %d outreach rows",
        len(bundle.emails),
        len(bundle.ad_headlines),
        len(bundle.personalized),
    )
    return bundle
