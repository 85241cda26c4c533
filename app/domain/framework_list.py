from typing import Iterable, List, Optional

from app.domain.selection import option_value


class FrameworkList:
    """Value object for the ordered content-framework tags of a video.

    - custom text is split by comma, each piece trimmed, empties dropped
    - preset selections are unwrapped via ``option_value``
    - order is preserved and duplicates are kept as entered
    """

    SEPARATOR = ","

    def __init__(self, values: List[str]):
        self.values = values

    @classmethod
    def from_custom_text(cls, text: Optional[str]) -> "FrameworkList":
        if not text or not text.strip():
            return cls([])
        parts = [p.strip() for p in text.split(cls.SEPARATOR)]
        return cls([p for p in parts if p])

    @classmethod
    def from_selection(cls, entries: Optional[Iterable]) -> "FrameworkList":
        if not entries:
            return cls([])
        values: List[str] = []
        for entry in entries:
            value = option_value(entry)
            if value:
                values.append(value)
        return cls(values)

    def is_empty(self) -> bool:
        return not self.values

    def joined(self) -> str:
        return self.SEPARATOR.join(self.values)

    def to_list(self) -> List[str]:
        return list(self.values)
