"""
==============================================================================
Common Schemas Module
==============================================================================

Shared response schemas used across all API endpoints.

==============================================================================
"""

from typing import Literal

from pydantic import BaseModel, Field


class OkResponse(BaseModel):
    """Acknowledgement for updates and deletes, always `{"ok": true}`."""
    ok: Literal[True] = Field(default=True)


class IdResponse(BaseModel):
    """Identifier of a newly created entity."""
    id: int
