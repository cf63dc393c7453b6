"""
Response formatting service.

Serializes output envelopes to the JSON text carried in tool results and
resource bodies. Output is deterministic: identical envelopes always yield
identical text.
"""

import json
import logging
from typing import Any

import mcp.types as types

logger = logging.getLogger(__name__)


class ResponseFormatter:
    """Format envelopes as indented JSON text content."""

    INDENT = 2

    @staticmethod
    def format_response(data: Any) -> str:
        """
        Format data as JSON.

        Args:
            data: Pydantic envelope or plain JSON-compatible data

        Returns:
            JSON string
        """
        # Handle Pydantic models
        if hasattr(data, "model_dump"):
            data = data.model_dump(mode="json")

        return json.dumps(data, indent=ResponseFormatter.INDENT)

    @staticmethod
    def to_text_content(data: Any) -> list[types.TextContent]:
        """Wrap formatted data as MCP tool result content."""
        return [types.TextContent(type="text", text=ResponseFormatter.format_response(data))]


# Singleton instance
_formatter: ResponseFormatter | None = None


def get_formatter() -> ResponseFormatter:
    """Get global formatter instance."""
    global _formatter
    if _formatter is None:
        _formatter = ResponseFormatter()
    return _formatter
