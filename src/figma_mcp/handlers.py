"""
Tool handlers and the dispatcher that routes tools/call requests to them.

Each handler performs exactly one Figma API call. Handlers never catch
errors; ``dispatch`` turns HTTP failures into ``isError`` results and lets
everything else through as a protocol fault.
"""

import json
import logging
from typing import Any, Awaitable, Callable, Dict, Mapping, Tuple, Type

import httpx
from mcp.shared.exceptions import McpError
from mcp.types import (
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    CallToolResult,
    ErrorData,
    TextContent,
)
from pydantic import BaseModel, ValidationError

from .api import error_message, request, response_payload
from .tools import (
    CommentArgs,
    CreateWebhookArgs,
    FileArgs,
    PostCommentArgs,
    ProjectArgs,
    TeamArgs,
    WebhookArgs,
)

logger = logging.getLogger("figma_mcp")

Handler = Callable[[httpx.AsyncClient, Any], Awaitable[CallToolResult]]

# ---------------------------------------------------------------------------
# MCP response helpers
# ---------------------------------------------------------------------------


def ok(text: str) -> CallToolResult:
    """Wrap a successful result in a single-block CallToolResult."""
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=False)


def err(msg: str) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=msg)], isError=True)


def ok_json(response: httpx.Response) -> CallToolResult:
    return ok(json.dumps(response_payload(response), indent=2, ensure_ascii=False))


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


async def get_file(client: httpx.AsyncClient, args: FileArgs) -> CallToolResult:
    return ok_json(await request(client, "GET", f"/files/{args.file_key}"))


async def get_file_comments(client: httpx.AsyncClient, args: FileArgs) -> CallToolResult:
    return ok_json(await request(client, "GET", f"/files/{args.file_key}/comments"))


async def post_comment(client: httpx.AsyncClient, args: PostCommentArgs) -> CallToolResult:
    response = await request(
        client, "POST", f"/files/{args.file_key}/comments", {"message": args.message}
    )
    return ok_json(response)


async def delete_comment(client: httpx.AsyncClient, args: CommentArgs) -> CallToolResult:
    await request(client, "DELETE", f"/files/{args.file_key}/comments/{args.comment_id}")
    return ok("Comment deleted successfully")


async def get_team_projects(client: httpx.AsyncClient, args: TeamArgs) -> CallToolResult:
    return ok_json(await request(client, "GET", f"/teams/{args.team_id}/projects"))


async def get_project_files(client: httpx.AsyncClient, args: ProjectArgs) -> CallToolResult:
    return ok_json(await request(client, "GET", f"/projects/{args.project_id}/files"))


async def get_file_components(client: httpx.AsyncClient, args: FileArgs) -> CallToolResult:
    return ok_json(await request(client, "GET", f"/files/{args.file_key}/components"))


async def get_component_styles(client: httpx.AsyncClient, args: TeamArgs) -> CallToolResult:
    return ok_json(await request(client, "GET", f"/teams/{args.team_id}/styles"))


async def get_file_versions(client: httpx.AsyncClient, args: FileArgs) -> CallToolResult:
    return ok_json(await request(client, "GET", f"/files/{args.file_key}/versions"))


async def create_webhook(client: httpx.AsyncClient, args: CreateWebhookArgs) -> CallToolResult:
    body = {"event_type": args.event_type, "callback_url": args.callback_url}
    return ok_json(await request(client, "POST", f"/teams/{args.team_id}/webhooks", body))


async def get_webhooks(client: httpx.AsyncClient, args: TeamArgs) -> CallToolResult:
    return ok_json(await request(client, "GET", f"/teams/{args.team_id}/webhooks"))


async def delete_webhook(client: httpx.AsyncClient, args: WebhookArgs) -> CallToolResult:
    await request(client, "DELETE", f"/webhooks/{args.webhook_id}")
    return ok("Webhook deleted successfully")


# Tool name -> (argument model, handler). Must list every name in ALL_TOOLS.
HANDLERS: Dict[str, Tuple[Type[BaseModel], Handler]] = {
    "get_file": (FileArgs, get_file),
    "get_file_comments": (FileArgs, get_file_comments),
    "post_comment": (PostCommentArgs, post_comment),
    "delete_comment": (CommentArgs, delete_comment),
    "get_team_projects": (TeamArgs, get_team_projects),
    "get_project_files": (ProjectArgs, get_project_files),
    "get_file_components": (FileArgs, get_file_components),
    "get_component_styles": (TeamArgs, get_component_styles),
    "get_file_versions": (FileArgs, get_file_versions),
    "create_webhook": (CreateWebhookArgs, create_webhook),
    "get_webhooks": (TeamArgs, get_webhooks),
    "delete_webhook": (WebhookArgs, delete_webhook),
}


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------


async def dispatch(
    client: httpx.AsyncClient,
    name: str,
    arguments: Mapping[str, Any],
) -> CallToolResult:
    """Run the tool called *name* with *arguments*.

    Raises McpError (METHOD_NOT_FOUND) for an unknown tool and McpError
    (INVALID_PARAMS) when the arguments do not fit the tool. Figma API
    failures come back as a CallToolResult with isError set; any other
    exception propagates.
    """
    entry = HANDLERS.get(name)
    if entry is None:
        raise McpError(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))
    model, handler = entry

    try:
        args = model.model_validate(dict(arguments or {}))
    except ValidationError as e:
        raise McpError(
            ErrorData(code=INVALID_PARAMS, message=f"Invalid arguments for {name}: {e}")
        ) from e

    try:
        return await handler(client, args)
    except httpx.HTTPError as e:
        message = error_message(e)
        logger.warning("Figma API error in %s: %s", name, message)
        return err(f"Figma API error: {message}")
    except Exception:
        logger.exception("Unexpected error in %s", name)
        raise
