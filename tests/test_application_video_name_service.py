"""
Application: VideoNameService（正規化→検証→生成のパイプライン）
"""

from datetime import date

import pytest

from app.application.video_name_service import (
    ERROR_PREFIX,
    GENERIC_ERROR_MESSAGE,
    VideoNameService,
)
from app.domain.errors import EmptyCustomFrameworkSet, PastDate

TODAY = date(2025, 6, 1)


def _params(**overrides):
    params = {
        "accountName": "男主播A",
        "frameworkMode": "preset",
        "frameworks": [{"value": "信任"}, {"value": "价格"}],
        "customFrameworks": "",
        "plannedPublishDate": "2025-06-01",
        "scriptName": "Polo衫面料深度解析",
        "editorName": "张三",
    }
    params.update(overrides)
    return params


@pytest.fixture
def service():
    return VideoNameService(clock=lambda: TODAY)


def test_happy_path_with_editor(service):
    """正常系: 全項目入力時は5つのセグメントを固定順で連結する"""
    assert service.generate(_params()) == "男主播A-信任,价格-20250601-Polo衫面料深度解析-张三"


def test_without_editor(service):
    """正常系: 編集者なしの場合は編集者セグメントを省略する"""
    params = _params()
    del params["editorName"]
    assert service.generate(params) == "男主播A-信任,价格-20250601-Polo衫面料深度解析"


def test_custom_mode_with_empty_list_fails(service):
    """検証エラー: カスタムモードで枠組みが空ならエラー"""
    params = _params(frameworkMode={"value": "custom"}, customFrameworks="")
    assert service.generate(params) == (
        ERROR_PREFIX + "at least one custom framework option is required in custom mode"
    )
    with pytest.raises(EmptyCustomFrameworkSet):
        service.build(params)


def test_custom_mode_uses_free_text(service):
    params = _params(frameworkMode="custom", customFrameworks="性价比, 实用性 ,美观度")
    assert service.generate(params) == (
        "男主播A-性价比,实用性,美观度-20250601-Polo衫面料深度解析-张三"
    )


def test_yesterday_is_rejected(service):
    """検証エラー: 昨日の日付は公開日として受け付けない"""
    params = _params(plannedPublishDate=["2025-05-31"])
    assert service.generate(params) == ERROR_PREFIX + "publish date cannot be earlier than today"
    with pytest.raises(PastDate):
        service.build(params)


def test_short_script_name(service):
    """検証エラー: 2文字の脚本名はエラー"""
    assert service.generate(_params(scriptName="ab")) == (
        ERROR_PREFIX + "script name requires at least 3 characters"
    )


def test_first_rule_wins(service):
    result = service.generate(_params(accountName="a", plannedPublishDate=None, scriptName=""))
    assert result == ERROR_PREFIX + "account name requires at least 2 characters"


def test_malformed_date_surfaces_generic_message(service):
    assert service.generate(_params(plannedPublishDate="someday")) == (
        ERROR_PREFIX + GENERIC_ERROR_MESSAGE
    )


def test_unexpected_fault_is_caught_at_boundary():
    def broken_clock():
        raise RuntimeError("clock unavailable")

    assert VideoNameService(clock=broken_clock).generate(_params()) == (
        ERROR_PREFIX + GENERIC_ERROR_MESSAGE
    )


def test_clock_is_read_once_per_call():
    calls = []

    def clock():
        calls.append(1)
        return TODAY

    svc = VideoNameService(clock=clock)
    svc.generate(_params())
    svc.generate(_params())
    assert len(calls) == 2


def test_generate_is_idempotent(service):
    assert service.generate(_params()) == service.generate(_params())


def test_names_exactly_at_minimum_length_are_accepted(service):
    """境界値: 前後の空白を除いて2文字のアカウント名・3文字の脚本名は受け付ける"""
    params = {"accountName": " ab ", "plannedPublishDate": "2025-06-01", "scriptName": " abc "}
    assert service.generate(params) == "ab-20250601-abc"
