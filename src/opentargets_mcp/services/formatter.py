"""
Response formatting service.

Serializes normalized tool output to the pretty-printed JSON text returned
in the MCP text content block.
"""

import json
import logging
from typing import Any

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class ResponseFormatter:
    """
    Format normalized responses as JSON.

    Optional fields that were never set on a row model are left out of the
    output; fields set explicitly (including to null) are kept.
    """

    @staticmethod
    def format_response(data: Any) -> str:
        """
        Format data as indented JSON.

        Args:
            data: Pydantic model or plain JSON-compatible data

        Returns:
            JSON string
        """
        return json.dumps(ResponseFormatter.to_dict(data), indent=2)

    @staticmethod
    def to_dict(data: Any) -> Any:
        """Convert a response model to plain JSON-compatible data."""
        if isinstance(data, BaseModel):
            return data.model_dump(mode="json", by_alias=True, exclude_unset=True)
        return data
