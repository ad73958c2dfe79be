"""ASGI entrypoint for the Calorie Coach API."""

from calorie_coach.api.app import create_app
from calorie_coach.containers import build_container

app = create_app(build_container())
