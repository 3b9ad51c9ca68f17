"""
Figma REST API access: configuration, the shared HTTP client and request helpers.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import httpx

logger = logging.getLogger("figma_mcp")

FIGMA_API_BASE = "https://api.figma.com/v1"
TOKEN_ENV = "FIGMA_ACCESS_TOKEN"
TEAM_ENV = "FIGMA_TEAM_ID"


class ConfigError(Exception):
    """Raised when the server cannot be configured from its environment."""


@dataclass(frozen=True)
class FigmaConfig:
    access_token: str
    base_url: str = FIGMA_API_BASE
    team_id: Optional[str] = None


def load_config(
    environ: Optional[Mapping[str, str]] = None,
    base_url: str = FIGMA_API_BASE,
) -> FigmaConfig:
    """Build a FigmaConfig from environment variables.

    Raises ConfigError when FIGMA_ACCESS_TOKEN is missing or empty.
    """
    env = os.environ if environ is None else environ
    token = env.get(TOKEN_ENV, "")
    if not token:
        raise ConfigError(f"{TOKEN_ENV} environment variable is required")
    return FigmaConfig(
        access_token=token,
        base_url=base_url,
        team_id=env.get(TEAM_ENV) or None,
    )


def create_client(config: FigmaConfig, **kwargs: Any) -> httpx.AsyncClient:
    """Return an AsyncClient bound to the API root that sends the token on every call."""
    kwargs.setdefault("follow_redirects", True)
    return httpx.AsyncClient(
        base_url=config.base_url,
        headers={"X-Figma-Token": config.access_token},
        **kwargs,
    )


async def request(
    client: httpx.AsyncClient,
    method: str,
    path: str,
    body: Optional[dict] = None,
) -> httpx.Response:
    """Issue one API call; non-2xx responses raise httpx.HTTPStatusError."""
    logger.debug("Sending %s %s", method, path)
    response = await client.request(method, path, json=body)
    response.raise_for_status()
    return response


def response_payload(response: httpx.Response) -> Any:
    """Decoded JSON body, or the raw text when the body is not JSON."""
    try:
        return response.json()
    except ValueError:
        return response.text


def error_message(exc: httpx.HTTPError) -> str:
    """The API's own "message" field when present, else the local exception text."""
    if isinstance(exc, httpx.HTTPStatusError):
        payload = response_payload(exc.response)
        if isinstance(payload, dict) and payload.get("message") is not None:
            return str(payload["message"])
    return str(exc) or exc.__class__.__name__
