"""
Services layer for request shaping and response formatting.
"""

from opentargets_mcp.services.formatter import ResponseFormatter
from opentargets_mcp.services.variables import drop_unset

__all__ = [
    "ResponseFormatter",
    "drop_unset",
]
