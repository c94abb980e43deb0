from enum import Enum
from typing import Dict, Tuple

from honestbot.py.slack.models import SubmittedAction


class LookupStatus(Enum):
    FOUND = 1
    EMPTY = 2
    MISSING = 3


def find_submitted_value(
    values: Dict[str, Dict[str, SubmittedAction]],
    block_id: str,
    action_id: str
) -> Tuple[LookupStatus, str]:
    """Look up the text a user submitted for one input element.

    Returns the status alongside the value so callers can tell an input that
    was left blank apart from one that isn't in the payload at all. The value
    is always a string, "" when nothing was found."""
    action = values.get(block_id, {}).get(action_id)
    if action is None or action.value is None:
        return LookupStatus.MISSING, ""
    if action.value == "":
        return LookupStatus.EMPTY, ""
    return LookupStatus.FOUND, action.value
