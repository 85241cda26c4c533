import logging
from datetime import date
from typing import Any, Callable, Mapping, Optional

from app.application.input_normalizer import normalize_form_input
from app.application.validator import validate
from app.domain.errors import VideoNameValidationError
from app.domain.video_name import VideoName

ERROR_PREFIX = "Error: "
GENERIC_ERROR_MESSAGE = (
    "an error occurred while generating the video name, please check the input data"
)


class VideoNameService:
    """Run normalize -> validate -> compose for one form submission.

    ``clock`` returns today's local date and is read once per call.
    ``build()`` raises validation errors; ``generate()`` turns every outcome
    into a single text value.
    """

    def __init__(self, clock: Callable[[], date] = date.today):
        self._clock = clock

    def build(self, params: Optional[Mapping[str, Any]]) -> VideoName:
        normalized = normalize_form_input(params)
        result = validate(normalized, today=self._clock())
        if not result.is_valid:
            raise result.error
        return VideoName.from_input(normalized)

    def generate(self, params: Optional[Mapping[str, Any]]) -> str:
        try:
            name = self.build(params)
        except VideoNameValidationError as e:
            logging.info(f"入力エラー: {type(e).__name__}: {e}")
            return f"{ERROR_PREFIX}{e}"
        except Exception as e:
            logging.error(f"動画名生成エラー: {type(e).__name__}: {str(e)}")
            return f"{ERROR_PREFIX}{GENERIC_ERROR_MESSAGE}"

        logging.info(f"動画名を生成しました: {name.value}")
        return name.value
