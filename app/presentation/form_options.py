from typing import Dict, List

from app.domain.selection import MODE_CUSTOM, MODE_PRESET

LABELS = {
    "accountLabel": "所属账号名称",
    "frameworkLabel": "主打框架",
    "customFrameworkLabel": "自定义框架选项",
    "frameworkModeLabel": "框架配置模式",
    "dateLabel": "预定发布日期",
    "scriptLabel": "脚本名称",
    "editorLabel": "剪辑负责人姓名",
    "accountPlaceholder": "例如：男主播A",
    "scriptPlaceholder": "例如：Polo衫面料深度解析",
    "editorPlaceholder": "例如：张三",
    "customFrameworkPlaceholder": "请输入自定义框架选项，用逗号分隔，例如：性价比,实用性,美观度",
    "usePreset": "使用预设选项",
    "useCustom": "使用自定义选项",
}

# (label, value); the value is what ends up in the video name
DEFAULT_FRAMEWORK_OPTIONS = [
    ("信任", "信任"),
    ("价格", "价格"),
    ("品质", "品质"),
    ("情感", "情感"),
    ("专业", "专业"),
    ("创意", "创意"),
]

FRAMEWORK_MODE_OPTIONS = [
    (LABELS["usePreset"], MODE_PRESET),
    (LABELS["useCustom"], MODE_CUSTOM),
]


def to_slack_options(pairs) -> List[Dict]:
    return [
        {"text": {"type": "plain_text", "text": label}, "value": value} for label, value in pairs
    ]
