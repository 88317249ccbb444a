"""ASGI entrypoint for the animal portrait studio API."""

from animal_portrait.api.app import create_app
from animal_portrait.containers import build_container

app = create_app(build_container())
