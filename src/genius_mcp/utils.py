"""Error handling utilities for the Genius MCP server.

Tool calls never raise: failures become an error result carrying the
original message. Resource reads re-raise failures as ResourceReadError.
"""

import json
import logging
from typing import Any, Awaitable, Callable, Dict, Tuple, Union

import httpx
import mcp.types as types

from genius.exceptions import (
    GeniusAuthenticationError,
    GeniusError,
    GeniusNotFoundError,
    LyricsFetchError,
)

logger = logging.getLogger(__name__)


class MCPError(Exception):
    """Base exception for MCP server errors."""

    pass


class ResourceReadError(MCPError):
    """A resource could not be read."""

    pass


def to_json(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


def text_result(text: str, is_error: bool = False) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        isError=is_error,
    )


async def safe_tool_execution(
    tool_name: str,
    handler: Callable[[Dict[str, Any]], Awaitable[Union[str, Dict[str, Any]]]],
    arguments: Dict[str, Any],
) -> types.CallToolResult:
    """Execute tool with comprehensive error handling.

    Args:
        tool_name: Name of the tool being executed
        handler: Async function to execute
        arguments: Tool arguments

    Returns:
        types.CallToolResult: Tool result, or an error result (``isError``)
        whose text is a JSON object with ``error``, ``message`` and the ids
        the tool was called with
    """
    try:
        result = await handler(arguments)

        if isinstance(result, str):
            return text_result(result)
        return text_result(to_json(result))

    except GeniusAuthenticationError as e:
        logger.error(f"Authentication failed in {tool_name}: {e}")
        detail = str(e)

    except GeniusNotFoundError as e:
        logger.error(f"Resource not found in {tool_name}: {e}")
        detail = str(e)

    except LyricsFetchError as e:
        logger.error(f"Lyrics page fetch failed in {tool_name}: {e}")
        detail = str(e)

    except GeniusError as e:
        logger.error(f"Genius error in {tool_name}: {e}")
        detail = str(e)

    except httpx.ConnectError as e:
        logger.error(f"Connection failed in {tool_name}: {e}")
        detail = f"Unable to connect to Genius ({e}). Please check your network and GENIUS_API_BASE."

    except httpx.TimeoutException as e:
        logger.error(f"Request timed out in {tool_name}: {e}")
        detail = f"Request timed out ({e}). Genius took too long to respond. Please try again."

    except ValueError as e:
        logger.error(f"Parameter error in {tool_name}: {e}")
        detail = f"Invalid parameters: {e}"

    except Exception as e:
        logger.exception(f"Unexpected error in {tool_name}")
        detail = f"An unexpected error occurred: {e}. Please check the logs for details."

    prefix, context = _describe_failure(tool_name, arguments)
    payload = {"error": True, "message": f"{prefix}: {detail}"}
    payload.update(context)
    return text_result(to_json(payload), is_error=True)


def _describe_failure(tool_name: str, arguments: Dict[str, Any]) -> Tuple[str, Dict[str, Any]]:
    """Build the error message prefix and echoed arguments for a tool.

    Args:
        tool_name: Name of the tool
        arguments: Tool arguments

    Returns:
        (prefix, context) where context echoes the identifying argument
    """
    if tool_name == "genius-search-song":
        return "Error executing search in Genius", {"query": arguments.get("q")}
    if tool_name == "genius-song-lyrics":
        song_id = arguments.get("song_id")
        return f"Could not read the song lyrics for song {song_id}", {"song_id": song_id}
    if tool_name == "genius-list-artist-songs":
        artist_id = arguments.get("artist_id")
        return f"Error listing songs for artist {artist_id}", {"artist_id": artist_id}
    return f"Error executing {tool_name}", {}
