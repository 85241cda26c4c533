from typing import List

from app.domain.framework_list import FrameworkList
from app.domain.publish_date import format_date_stamp, is_absent
from app.domain.video_name_input import NormalizedInput


class VideoName:
    """Value object for the composed video name.

    Segments are joined with '-' in fixed order:
    account, frameworks?, date?, script, editor?
    Optional segments are dropped entirely when empty.
    """

    SEPARATOR = "-"

    def __init__(self, segments: List[str]):
        self.segments = segments
        self.value = self.SEPARATOR.join(segments)

    @classmethod
    def from_input(cls, normalized: NormalizedInput) -> "VideoName":
        # Caller validates first; account and script are never empty here.
        segments = [normalized.account_name.strip()]
        if normalized.framework_values:
            segments.append(FrameworkList(normalized.framework_values).joined())
        if not is_absent(normalized.date_value):
            segments.append(format_date_stamp(normalized.date_value))
        segments.append(normalized.script_name.strip())
        editor = (normalized.editor_name or "").strip()
        if editor:
            segments.append(editor)
        return cls(segments)

    def __eq__(self, other) -> bool:
        return isinstance(other, VideoName) and other.value == self.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value
