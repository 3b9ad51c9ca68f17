"""
Tool descriptors advertised by tools/list, and the argument models tools/call
arguments are parsed into.
"""

from typing import Dict, List

from mcp.types import Tool
from pydantic import BaseModel

# ---------------------------------------------------------------------------
# Argument models
# ---------------------------------------------------------------------------


class FileArgs(BaseModel):
    file_key: str


class PostCommentArgs(BaseModel):
    file_key: str
    message: str


class CommentArgs(BaseModel):
    file_key: str
    comment_id: str


class TeamArgs(BaseModel):
    team_id: str


class ProjectArgs(BaseModel):
    project_id: str


class CreateWebhookArgs(BaseModel):
    team_id: str
    event_type: str
    callback_url: str


class WebhookArgs(BaseModel):
    webhook_id: str


# ---------------------------------------------------------------------------
# Tool definitions (list_tools handler)
# ---------------------------------------------------------------------------

_FILE_KEY = {"type": "string", "description": "The Figma file key"}
_TEAM_ID = {"type": "string", "description": "The team ID"}


def _schema(properties: Dict[str, dict], required: List[str]) -> dict:
    return {"type": "object", "properties": properties, "required": required}


ALL_TOOLS: List[Tool] = [
    # ── Files & comments ────────────────────────────────────────────────────
    Tool(
        name="get_file",
        description="Get information about a Figma file",
        inputSchema=_schema({"file_key": _FILE_KEY}, ["file_key"]),
    ),
    Tool(
        name="get_file_comments",
        description="Get comments from a Figma file",
        inputSchema=_schema({"file_key": _FILE_KEY}, ["file_key"]),
    ),
    Tool(
        name="post_comment",
        description="Post a comment to a Figma file",
        inputSchema=_schema(
            {
                "file_key": _FILE_KEY,
                "message": {"type": "string", "description": "The comment message"},
            },
            ["file_key", "message"],
        ),
    ),
    Tool(
        name="delete_comment",
        description="Delete a comment from a Figma file",
        inputSchema=_schema(
            {
                "file_key": _FILE_KEY,
                "comment_id": {"type": "string", "description": "The comment ID"},
            },
            ["file_key", "comment_id"],
        ),
    ),
    # ── Teams & projects ────────────────────────────────────────────────────
    Tool(
        name="get_team_projects",
        description="Get projects for a team",
        inputSchema=_schema({"team_id": _TEAM_ID}, ["team_id"]),
    ),
    Tool(
        name="get_project_files",
        description="Get files in a project",
        inputSchema=_schema(
            {"project_id": {"type": "string", "description": "The project ID"}},
            ["project_id"],
        ),
    ),
    # ── Components, styles & versions ───────────────────────────────────────
    Tool(
        name="get_file_components",
        description="Get components in a file",
        inputSchema=_schema({"file_key": _FILE_KEY}, ["file_key"]),
    ),
    Tool(
        name="get_component_styles",
        description="Get published styles",
        inputSchema=_schema({"team_id": _TEAM_ID}, ["team_id"]),
    ),
    Tool(
        name="get_file_versions",
        description="Get version history of a file",
        inputSchema=_schema({"file_key": _FILE_KEY}, ["file_key"]),
    ),
    # ── Webhooks ────────────────────────────────────────────────────────────
    Tool(
        name="create_webhook",
        description="Create a webhook",
        inputSchema=_schema(
            {
                "team_id": _TEAM_ID,
                "event_type": {
                    "type": "string",
                    "description": "The event type to listen for",
                },
                "callback_url": {"type": "string", "description": "The callback URL"},
            },
            ["team_id", "event_type", "callback_url"],
        ),
    ),
    Tool(
        name="get_webhooks",
        description="List webhooks",
        inputSchema=_schema({"team_id": _TEAM_ID}, ["team_id"]),
    ),
    Tool(
        name="delete_webhook",
        description="Delete a webhook",
        inputSchema=_schema(
            {"webhook_id": {"type": "string", "description": "The webhook ID"}},
            ["webhook_id"],
        ),
    ),
]


def list_tools() -> List[Tool]:
    return list(ALL_TOOLS)
