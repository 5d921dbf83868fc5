"""FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends, Request

from app.services.draft_registry import DraftRegistry


def get_draft_registry(request: Request) -> DraftRegistry:
    """Registry of open drafts attached to the running app."""
    return request.app.state.drafts


Drafts = Annotated[DraftRegistry, Depends(get_draft_registry)]
