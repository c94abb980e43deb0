from typing import Any, Dict

IMPRESSION_BLOCK_ID = "impression_input"
IMPRESSION_ACTION_ID = "impression_value"


def plain_text(text: str) -> Dict[str, str]:
    return {"type": "plain_text", "text": text}


def impression_modal() -> Dict[str, Any]:
    """Builds the modal shown when someone runs the impression shortcut.

    The input block and its element use the fixed identifiers that the
    submission handler reads back out of `view.state.values`.

    See https://api.slack.com/reference/surfaces/views"""
    input_block = {
        "type": "input",
        "block_id": IMPRESSION_BLOCK_ID,
        "label": plain_text(
            "nice... please be honest (but not rude) and keep in mind that "
            "even though you're anon, this will be reviewed!"
        ),
        "element": {
            "type": "plain_text_input",
            "action_id": IMPRESSION_ACTION_ID,
            "multiline": True,
            "placeholder": plain_text("[impression here?]")
        }
    }

    return {
        "type": "modal",
        "title": plain_text("So you're here to give an honest impression?"),
        "submit": plain_text("Submit"),
        "close": plain_text("Cancel"),
        "blocks": [input_block]
    }
