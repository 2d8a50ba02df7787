"""ASGI entrypoint for the Stay Sphere API."""

from stay_sphere.api.app import create_app
from stay_sphere.containers import build_container

app = create_app(build_container())
