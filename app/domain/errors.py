class VideoNameValidationError(ValueError):
    """Base for user-facing validation failures.

    Each subclass carries a fixed message and the form field it concerns.
    """

    message = "invalid input"
    field = ""

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class MissingOrShortAccountName(VideoNameValidationError):
    message = "account name requires at least 2 characters"
    field = "accountName"


class MissingDate(VideoNameValidationError):
    message = "a publish date must be selected"
    field = "plannedPublishDate"


class PastDate(VideoNameValidationError):
    message = "publish date cannot be earlier than today"
    field = "plannedPublishDate"


class MissingOrShortScriptName(VideoNameValidationError):
    message = "script name requires at least 3 characters"
    field = "scriptName"


class EmptyCustomFrameworkSet(VideoNameValidationError):
    message = "at least one custom framework option is required in custom mode"
    field = "customFrameworks"
