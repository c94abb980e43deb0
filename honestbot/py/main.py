from typing import Optional

import logging
import sys

import uvicorn

from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import PlainTextResponse
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from honestbot.py.slack.client import SlackClient
from honestbot.py.slack.interactions import BadRequest, handle_interaction


class ConfigError(Exception):
    """Exception for missing or invalid startup configuration"""


class Settings(BaseSettings):
    port: int = 8080
    slack_bot_token: str = Field(min_length=1)
    slack_api_url: str = "https://slack.com/api"
    slack_timeout: float = Field(default=10.0, gt=0)

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        env_ignore_empty=True,
        frozen=True
    )


def load_settings(**overrides) -> Settings:
    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise ConfigError(f"invalid configuration: {e}") from e


logger = logging.getLogger("uvicorn")
logger.setLevel("DEBUG")


def get_slack(request: Request) -> SlackClient:
    return request.app.state.slack


def create_app(
    settings: Settings,
    slack: Optional[SlackClient] = None
) -> FastAPI:
    app = FastAPI()
    app.state.settings = settings
    if slack is None:
        slack = SlackClient(
            settings.slack_bot_token,
            settings.slack_api_url,
            settings.slack_timeout
        )
    app.state.slack = slack

    @app.on_event("startup")
    async def startup():
        app.state.slack.configure()

    @app.on_event("shutdown")
    async def shutdown_app():
        await app.state.slack.cleanup()

    @app.exception_handler(BadRequest)
    async def bad_request(request: Request, exc: BadRequest) -> Response:
        logger.info(f"rejected interaction: {exc}")
        return PlainTextResponse(str(exc), status_code=400)

    @app.get("/api/health")
    async def health() -> Response:
        return PlainTextResponse("^-^")

    @app.post("/api/new-impression")
    async def new_impression(
        request: Request,
        slack: SlackClient = Depends(get_slack)
    ) -> Response:
        """Receives Slack interactions for the impression shortcut.

        * shortcut - opens the impression modal
        * view_submission - logs the submitted impression and closes the
          modal"""
        logger.info("received new impression request")
        body = await request.body()
        return await handle_interaction(body, slack)

    return app


def run():
    logger.info("starting...")
    try:
        settings = load_settings()
    except ConfigError as e:
        # SLACK_BOT_TOKEN is required
        logger.critical(str(e))
        sys.exit(1)

    app = create_app(settings)
    logger.info(f"starting server on port {settings.port}")
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
