from typing import Any, List, Optional

from app.domain.selection import MODE_CUSTOM, MODE_PRESET


class NormalizedInput:
    """Canonical values of one form submission.

    Account, script and editor are kept untrimmed; length rules and the
    composer trim on their own.
    """

    def __init__(
        self,
        account_name: str,
        framework_values: List[str],
        date_value: Optional[Any],
        script_name: str,
        editor_name: Optional[str] = None,
        framework_mode: str = MODE_PRESET,
    ):
        self.account_name = account_name
        self.framework_values = framework_values
        self.date_value = date_value
        self.script_name = script_name
        self.editor_name = editor_name
        self.framework_mode = framework_mode

    @property
    def is_custom_mode(self) -> bool:
        return self.framework_mode == MODE_CUSTOM

    def __repr__(self) -> str:  # pragma: no cover - debug aid
        return (
            f"NormalizedInput(account_name={self.account_name!r}, "
            f"framework_values={self.framework_values!r}, date_value={self.date_value!r}, "
            f"script_name={self.script_name!r}, editor_name={self.editor_name!r}, "
            f"framework_mode={self.framework_mode!r})"
        )
