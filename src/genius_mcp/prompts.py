"""MCP Prompts Registry - search prompt for Genius.

This module implements the PromptRegistry class that exposes the
genius-search-prompt prompt.
"""

from typing import Any, Dict, List

import mcp.types as types


class PromptRegistry:
    """Registry for the MCP prompts.

    Provides:
        1. genius-search-prompt - Prepare a query to search for content in Genius
    """

    def __init__(self):
        """Initialize prompt registry."""
        self.prompts = self._define_prompts()

    def _define_prompts(self) -> Dict[str, types.Prompt]:
        return {
            "genius-search-prompt": types.Prompt(
                name="genius-search-prompt",
                description="Prepare a query to search for content in Genius.",
                arguments=[
                    types.PromptArgument(
                        name="initial_query",
                        description="An initial search term to include in the prompt.",
                        required=False,
                    ),
                ],
            ),
        }

    def get_all(self) -> List[types.Prompt]:
        return list(self.prompts.values())

    @staticmethod
    async def get_prompt(prompt_name: str, arguments: Dict[str, Any]) -> Dict[str, Any]:
        """Get a prompt with arguments filled in.

        Args:
            prompt_name: Name of prompt to get
            arguments: Prompt arguments

        Returns:
            Prompt result with description and messages

        Raises:
            ValueError: If prompt_name is invalid
        """
        handlers = {
            "genius-search-prompt": PromptRegistry._search_prompt,
        }

        if prompt_name not in handlers:
            raise ValueError(f"Unknown prompt: {prompt_name}")

        return handlers[prompt_name](arguments)

    @staticmethod
    def _search_prompt(arguments: Dict[str, Any]) -> Dict[str, Any]:
        """Generate genius-search-prompt."""
        initial_query = arguments.get("initial_query")
        query_text = f' about "{initial_query}"' if initial_query else ""

        return {
            "description": "This prompt helps you search in Genius.",
            "messages": [
                {
                    "role": "user",
                    "content": {
                        "type": "text",
                        "text": f"Please help me find information in Genius{query_text}. "
                        "What do you want to search for?",
                    },
                }
            ],
        }
