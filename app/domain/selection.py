from typing import Any, Mapping, Optional, Union

MODE_PRESET = "preset"
MODE_CUSTOM = "custom"


class SelectedOption:
    """A single picked value from a select-like form widget.

    Hosts send picked values either as a bare string or as an option object
    (a mapping or an object exposing ``value``, e.g. Slack's
    ``{"text": {...}, "value": "信任"}``). Both shapes collapse into this
    value object at the boundary; nothing downstream probes types again.
    """

    def __init__(self, value: str):
        self.value = value

    @classmethod
    def from_raw(cls, entry: Union[str, Mapping[str, Any], Any]) -> Optional["SelectedOption"]:
        if entry is None:
            return None
        if isinstance(entry, str):
            return cls(entry)
        if isinstance(entry, Mapping):
            inner = entry.get("value")
        else:
            inner = getattr(entry, "value", None)
        if inner is None or inner == "":
            return None
        return cls(str(inner))

    def __eq__(self, other) -> bool:
        return isinstance(other, SelectedOption) and other.value == self.value

    def __repr__(self) -> str:  # pragma: no cover - debug aid
        return f"SelectedOption({self.value!r})"


def option_value(entry) -> Optional[str]:
    """Return the scalar carried by a bare string or an option object."""
    option = SelectedOption.from_raw(entry)
    return option.value if option else None


def resolve_mode(raw) -> str:
    """Framework selection mode; anything other than "custom" means preset."""
    return MODE_CUSTOM if option_value(raw) == MODE_CUSTOM else MODE_PRESET
