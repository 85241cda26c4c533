from typing import Any, Dict

from app.presentation.constants import FORM_FIELDS


def _element_value(element: Dict[str, Any]) -> Any:
    """Slack の要素 state から生の値を取り出す（型ごとにキーが異なる）"""
    kind = element.get("type")
    if kind == "multi_static_select":
        return element.get("selected_options") or []
    if kind == "radio_buttons":
        return element.get("selected_option")
    if kind == "datepicker":
        return element.get("selected_date")
    return element.get("value")


def extract_form_params(view: Dict[str, Any]) -> Dict[str, Any]:
    """view_submission の state をフォームパラメータ（accountName 等）に変換する。

    選択肢オブジェクトはそのまま渡し、値の取り出しは正規化側に任せる。
    """
    values = view.get("state", {}).get("values", {})
    params: Dict[str, Any] = {}
    for field, (block_id, action_id) in FORM_FIELDS.items():
        element = values.get(block_id, {}).get(action_id)
        params[field] = _element_value(element) if element else None
    return params
