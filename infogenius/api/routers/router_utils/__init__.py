"""
Router utility functions.

Contains helper functions extracted from router endpoints to keep them clean.
"""

from infogenius.api.routers.router_utils.state_utils import (
    raise_for_cycle_error,
    to_state_response,
)

__all__ = [
    "raise_for_cycle_error",
    "to_state_response",
]
