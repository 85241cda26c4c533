from typing import Any, Mapping, Optional

from app.application.video_name_service import VideoNameService


def generate_video_name(params: Optional[Mapping[str, Any]]) -> str:
    """フォームのパラメータから動画名（またはエラーメッセージ）を返す"""
    return VideoNameService().generate(params)
