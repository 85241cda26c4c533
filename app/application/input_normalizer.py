from typing import Any, Mapping, Optional

from app.domain.framework_list import FrameworkList
from app.domain.publish_date import collapse_date_value
from app.domain.selection import MODE_CUSTOM, resolve_mode
from app.domain.video_name_input import NormalizedInput


def normalize_form_input(params: Optional[Mapping[str, Any]]) -> NormalizedInput:
    """Turn a loosely-typed form payload into a NormalizedInput.

    Never raises: missing or malformed fields become empty/absent values.
    Account, script and editor are passed through untrimmed.
    """
    params = params or {}

    mode = resolve_mode(params.get("frameworkMode"))
    if mode == MODE_CUSTOM:
        frameworks = FrameworkList.from_custom_text(_text_or_none(params.get("customFrameworks")))
    else:
        raw_frameworks = params.get("frameworks")
        if isinstance(raw_frameworks, (str, Mapping)):
            raw_frameworks = [raw_frameworks]
        elif not isinstance(raw_frameworks, (list, tuple)):
            raw_frameworks = None
        frameworks = FrameworkList.from_selection(raw_frameworks)

    return NormalizedInput(
        account_name=_text_or_none(params.get("accountName")) or "",
        framework_values=frameworks.to_list(),
        date_value=collapse_date_value(params.get("plannedPublishDate")),
        script_name=_text_or_none(params.get("scriptName")) or "",
        editor_name=_text_or_none(params.get("editorName")),
        framework_mode=mode,
    )


def _text_or_none(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)
