"""
仕様: 動画名生成（関数ラッパー）
"""


def test_generate_video_name_with_future_timestamp_array():
    """正常系: タイムスタンプ配列（ミリ秒）の先頭が日付として使われる"""
    from datetime import datetime

    from app.video_name_generator import generate_video_name

    millis = int(datetime(2999, 12, 31, 10, 0).timestamp() * 1000)
    result = generate_video_name(
        {
            "accountName": "男主播A",
            "frameworks": ["信任"],
            "plannedPublishDate": [millis],
            "scriptName": "Polo衫面料深度解析",
        }
    )
    assert result == "男主播A-信任-29991231-Polo衫面料深度解析"


def test_generate_video_name_returns_error_text():
    """異常系: 検証エラーはエラーメッセージ文字列として返る"""
    from app.video_name_generator import generate_video_name

    result = generate_video_name({"accountName": "A"})
    assert result == "Error: account name requires at least 2 characters"
