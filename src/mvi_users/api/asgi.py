"""ASGI entrypoint for the user list API."""

from mvi_users.api.app import create_app
from mvi_users.containers import build_container

app = create_app(build_container())
