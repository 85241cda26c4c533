from typing import Any, Dict, Optional

from app.presentation.constants import CALLBACK_IDS, FORM_FIELDS, MODAL_TITLES
from app.presentation.form_options import (
    DEFAULT_FRAMEWORK_OPTIONS,
    FRAMEWORK_MODE_OPTIONS,
    LABELS,
    to_slack_options,
)


def _input_block(
    field: str, label: str, element: Dict[str, Any], optional: bool = False
) -> Dict[str, Any]:
    block_id, action_id = FORM_FIELDS[field]
    return {
        "type": "input",
        "block_id": block_id,
        "optional": optional,
        "label": {"type": "plain_text", "text": label},
        "element": {**element, "action_id": action_id},
    }


def _text_element(placeholder: Optional[str] = None) -> Dict[str, Any]:
    element: Dict[str, Any] = {"type": "plain_text_input"}
    if placeholder:
        element["placeholder"] = {"type": "plain_text", "text": placeholder}
    return element


def build_form_modal() -> Dict[str, Any]:
    mode_options = to_slack_options(FRAMEWORK_MODE_OPTIONS)
    return {
        "type": "modal",
        "callback_id": CALLBACK_IDS["FORM"],
        "title": {"type": "plain_text", "text": MODAL_TITLES["FORM"]},
        "submit": {"type": "plain_text", "text": "生成"},
        "close": {"type": "plain_text", "text": "取消"},
        "blocks": [
            _input_block(
                "accountName", LABELS["accountLabel"], _text_element(LABELS["accountPlaceholder"])
            ),
            _input_block(
                "frameworkMode",
                LABELS["frameworkModeLabel"],
                {"type": "radio_buttons", "options": mode_options, "initial_option": mode_options[0]},
            ),
            _input_block(
                "frameworks",
                LABELS["frameworkLabel"],
                {
                    "type": "multi_static_select",
                    "options": to_slack_options(DEFAULT_FRAMEWORK_OPTIONS),
                },
                optional=True,
            ),
            _input_block(
                "customFrameworks",
                LABELS["customFrameworkLabel"],
                _text_element(LABELS["customFrameworkPlaceholder"]),
                optional=True,
            ),
            _input_block("plannedPublishDate", LABELS["dateLabel"], {"type": "datepicker"}),
            _input_block(
                "scriptName", LABELS["scriptLabel"], _text_element(LABELS["scriptPlaceholder"])
            ),
            _input_block(
                "editorName",
                LABELS["editorLabel"],
                _text_element(LABELS["editorPlaceholder"]),
                optional=True,
            ),
        ],
    }


def build_result_modal(video_name: str) -> Dict[str, Any]:
    return {
        "type": "modal",
        "title": {"type": "plain_text", "text": MODAL_TITLES["RESULT"]},
        "close": {"type": "plain_text", "text": "关闭"},
        "blocks": [
            {"type": "section", "text": {"type": "mrkdwn", "text": f"✅ `{video_name}`"}},
        ],
    }


def build_error_modal(error_message: str) -> Dict[str, Any]:
    return {
        "type": "modal",
        "title": {"type": "plain_text", "text": MODAL_TITLES["ERROR"]},
        "blocks": [{"type": "section", "text": {"type": "mrkdwn", "text": f"❌ {error_message}"}}],
    }
