"""
Shared fixtures: a real httpx.AsyncClient whose transport records requests
and answers with a canned response instead of calling Figma.
"""

from typing import Any, Dict, List, Optional

import httpx
import pytest
import pytest_asyncio

from figma_mcp.api import FigmaConfig, create_client

TOKEN = "figd_test_token"

# One valid argument set per tool
SAMPLE_ARGS: Dict[str, Dict[str, str]] = {
    "get_file": {"file_key": "ABC123"},
    "get_file_comments": {"file_key": "ABC123"},
    "post_comment": {"file_key": "ABC123", "message": "hi"},
    "delete_comment": {"file_key": "ABC123", "comment_id": "C1"},
    "get_team_projects": {"team_id": "T1"},
    "get_project_files": {"project_id": "P1"},
    "get_file_components": {"file_key": "ABC123"},
    "get_component_styles": {"team_id": "T1"},
    "get_file_versions": {"file_key": "ABC123"},
    "create_webhook": {
        "team_id": "T1",
        "event_type": "FILE_UPDATE",
        "callback_url": "https://example.com/hook",
    },
    "get_webhooks": {"team_id": "T1"},
    "delete_webhook": {"webhook_id": "W1"},
}


class FakeFigma:
    """Callable for httpx.MockTransport; set status/body/error before the call."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status = 200
        self.body: Any = {}
        self.error: Optional[Exception] = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status, content=self.body)
        return httpx.Response(self.status, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def figma() -> FakeFigma:
    return FakeFigma()


@pytest_asyncio.fixture
async def client(figma):
    config = FigmaConfig(access_token=TOKEN)
    async with create_client(config, transport=httpx.MockTransport(figma)) as c:
        yield c
