from datetime import date
from typing import Optional

from app.domain.errors import (
    EmptyCustomFrameworkSet,
    MissingDate,
    MissingOrShortAccountName,
    MissingOrShortScriptName,
    PastDate,
    VideoNameValidationError,
)
from app.domain.publish_date import is_absent, to_calendar_date
from app.domain.video_name_input import NormalizedInput

MIN_ACCOUNT_NAME_LENGTH = 2
MIN_SCRIPT_NAME_LENGTH = 3


class ValidationResult:
    """Either valid, or invalid with the first failing rule's error."""

    def __init__(self, error: Optional[VideoNameValidationError] = None):
        self.error = error

    @property
    def is_valid(self) -> bool:
        return self.error is None

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error else None

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def invalid(cls, error: VideoNameValidationError) -> "ValidationResult":
        return cls(error)


def validate(normalized: NormalizedInput, today: date) -> ValidationResult:
    """Apply the rules in order and stop at the first violation.

    An undecipherable date raises ValueError; the pipeline boundary handles it.
    """
    if len(normalized.account_name.strip()) < MIN_ACCOUNT_NAME_LENGTH:
        return ValidationResult.invalid(MissingOrShortAccountName())

    if is_absent(normalized.date_value):
        return ValidationResult.invalid(MissingDate())

    if to_calendar_date(normalized.date_value) < today:
        return ValidationResult.invalid(PastDate())

    if len(normalized.script_name.strip()) < MIN_SCRIPT_NAME_LENGTH:
        return ValidationResult.invalid(MissingOrShortScriptName())

    # custom mode needs at least one tag; checked after the generic rules
    if normalized.is_custom_mode and not normalized.framework_values:
        return ValidationResult.invalid(EmptyCustomFrameworkSet())

    return ValidationResult.valid()
