from typing import Dict, Optional

from app.application.video_name_service import GENERIC_ERROR_MESSAGE
from app.domain.errors import VideoNameValidationError
from app.presentation.constants import FORM_FIELDS


def get_field_errors(exc: Exception) -> Optional[Dict[str, str]]:
    """Map a validation error to Slack's ``response_action="errors"`` payload.

    Returns None for anything that is not tied to a form field; callers show
    ``get_error_message(exc)`` in an error modal instead.
    """
    if not isinstance(exc, VideoNameValidationError):
        return None
    field = FORM_FIELDS.get(exc.field)
    if field is None:
        return None
    block_id, _ = field
    return {block_id: str(exc)}


def get_error_message(exc: Exception) -> str:
    if isinstance(exc, VideoNameValidationError):
        return str(exc)
    return GENERIC_ERROR_MESSAGE
