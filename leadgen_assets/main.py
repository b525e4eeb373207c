"""Orchestration: payload -> validate -> generate -> AssetBundle."""

import asyncio
from typing import Any

from .backends import TextBackend
from .generator import generate_assets
from .models import AssetBundle
from .validator import validate_profile


def build_assets(
    payload: Any,
    backend: TextBackend | None = None,
    on_progress: callable = None,
) -> AssetBundle:
    """
    Validate a raw payload and generate its asset bundle.

    Steps:
        1. Validate payload -> BusinessProfile (no generation on failure)
        2. Generate bundle through the backend

    Args:
        payload: Decoded JSON body (or equivalent dict from the CLI)
        backend: Text backend (default: deterministic templates)
        on_progress: Optional callback(step: str) for progress updates

    Returns:
        AssetBundle

    Raises:
        ValidationError, GenerationError
    """
    def _progress(msg: str):
        if on_progress:
            on_progress(msg)

    _progress("Validating business profile...")
    profile = validate_profile(payload)

    _progress(f"Generating assets for {profile.business_name}...")
    return generate_assets(profile, backend)


async def build_assets_async(
    payload: Any,
    backend: TextBackend | None = None,
) -> AssetBundle:
    """Run build_assets off the event loop; the backend call is blocking."""
    return await asyncio.to_thread(build_assets, payload, backend)
