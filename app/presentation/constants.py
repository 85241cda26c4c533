CALLBACK_IDS = {
    "FORM": "video_name_form",
}

SHORTCUT_ID = "generate_video_name_shortcut"

# block_id / action_id pairs of the form modal, keyed by form parameter name
FORM_FIELDS = {
    "accountName": ("account_name_input", "account_name"),
    "frameworkMode": ("framework_mode_input", "framework_mode"),
    "frameworks": ("frameworks_input", "frameworks"),
    "customFrameworks": ("custom_frameworks_input", "custom_frameworks"),
    "plannedPublishDate": ("publish_date_input", "publish_date"),
    "scriptName": ("script_name_input", "script_name"),
    "editorName": ("editor_name_input", "editor_name"),
}

MODAL_TITLES = {
    "FORM": "生成视频名称",
    "RESULT": "视频名称已生成",
    "ERROR": "错误",
}
