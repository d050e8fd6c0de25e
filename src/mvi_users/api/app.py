"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status

from mvi_users.api.models import (
    DeleteUserRequest,
    EffectsResponse,
    IntentRequest,
    NotificationResponse,
    ViewStateResponse,
)
from mvi_users.app_logging import configure_logging
from mvi_users.containers import AppContainer
from mvi_users.domain.intents import DeleteUser, Intent, LoadUsers
from mvi_users.domain.state import ViewState


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.container.dispatcher.handle(LoadUsers())
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/state")
    async def current_state(request: Request) -> ViewStateResponse:
        """Return the current view state."""
        state_container: AppContainer = request.app.state.container
        return _to_response(state_container.dispatcher.state.value)

    @app.post("/intents")
    async def dispatch_intent(
        body: IntentRequest, request: Request
    ) -> ViewStateResponse:
        """Dispatch an intent and return the state once its work has settled."""
        state_container: AppContainer = request.app.state.container
        dispatcher = state_container.dispatcher
        payload = body.root
        intent: Intent
        if isinstance(payload, DeleteUserRequest):
            user = next(
                (u for u in dispatcher.state.value.users if u.id == payload.user_id),
                None,
            )
            if user is None:
                logger.warning(
                    "Delete requested for unknown user: id=%s", payload.user_id
                )
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
            intent = DeleteUser(user)
        else:
            intent = payload.to_intent()
        dispatcher.handle(intent)
        await dispatcher.join()
        return _to_response(dispatcher.state.value)

    @app.get("/effects")
    async def pending_effects(request: Request) -> EffectsResponse:
        """Return and consume pending one-shot effects."""
        state_container: AppContainer = request.app.state.container
        effects = state_container.dispatcher.effects.drain()
        return EffectsResponse(
            effects=[NotificationResponse.model_validate(effect) for effect in effects]
        )

    return app


def _to_response(state: ViewState) -> ViewStateResponse:
    return ViewStateResponse.model_validate(state)
