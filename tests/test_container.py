"""Tests for container wiring."""

import asyncio

from pantry_chef.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)
    assert container.generation_service is not None
    assert container.safety_validator.matcher.catalog is container.catalog
    asyncio.run(container.close_resources())
