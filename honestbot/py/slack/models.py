from typing import Dict, Optional

from pydantic import BaseModel, Field


class SubmittedAction(BaseModel):
    """State of one input element. Slack leaves out `value` for elements
    that aren't text inputs, and for optional inputs nobody filled in."""
    value: Optional[str] = None


class ViewState(BaseModel):
    values: Dict[str, Dict[str, SubmittedAction]] = {}


class View(BaseModel):
    id: str = ""
    state: ViewState = Field(default_factory=ViewState)


class InteractionPayload(BaseModel):
    """The subset of an interaction payload this bot reads. Everything else
    Slack sends along (user, team, token, ...) is ignored.

    See:
    https://api.slack.com/reference/interaction-payloads/shortcuts
    https://api.slack.com/reference/interaction-payloads/views"""
    type: str = ""
    trigger_id: str = ""
    view: Optional[View] = None
