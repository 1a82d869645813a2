"""ASGI entrypoint for the recipe API."""

from pantry_chef.api.app import create_app
from pantry_chef.containers import build_container

app = create_app(build_container())
