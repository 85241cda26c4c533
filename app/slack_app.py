import logging
import os

from slack_bolt import App
from slack_bolt.adapter.socket_mode import SocketModeHandler

from app.application.video_name_service import VideoNameService
from app.domain.errors import VideoNameValidationError
from app.infrastructure.slack_client import SlackClient
from app.presentation.constants import CALLBACK_IDS, SHORTCUT_ID
from app.presentation.error_messages import get_error_message, get_field_errors
from app.presentation.form_state import extract_form_params
from app.presentation.modal_builder import (
    build_error_modal,
    build_form_modal,
    build_result_modal,
)


def handle_shortcut(ack, shortcut, client):
    """ショートカットハンドラー：動画名フォームを表示"""
    ack()
    SlackClient(client).open_view(trigger_id=shortcut["trigger_id"], view=build_form_modal())


def handle_modal_submission(ack, view, client, body):
    """フォーム送信ハンドラー：入力の正規化・検証・動画名生成まで"""
    service = VideoNameService()

    try:
        params = extract_form_params(view)
        video_name = service.build(params)
    except VideoNameValidationError as e:
        logging.info(f"入力エラー: {type(e).__name__}: {str(e)}")
        errors = get_field_errors(e)
        if errors:
            # 該当フィールドの下にエラーを表示（モーダルは閉じない）
            ack(response_action="errors", errors=errors)
        else:
            ack(response_action="update", view=build_error_modal(get_error_message(e)))
        return
    except Exception as e:
        logging.error(f"動画名生成エラー: {type(e).__name__}: {str(e)}")
        ack(response_action="update", view=build_error_modal(get_error_message(e)))
        return

    logging.info(f"動画名を生成しました: {video_name.value}")
    ack(response_action="update", view=build_result_modal(video_name.value))

    # コピーしやすいように DM でも送る
    user_id = body.get("user", {}).get("id")
    if user_id:
        try:
            SlackClient(client).post_message(channel=user_id, text=video_name.value)
        except Exception as e:
            logging.error(f"DM送信エラー: {type(e).__name__}: {str(e)}")


def create_app():
    """Slack Boltアプリケーションを作成"""
    app = App()

    app.shortcut(SHORTCUT_ID)(handle_shortcut)
    app.view(CALLBACK_IDS["FORM"])(handle_modal_submission)

    return app


if __name__ == "__main__":
    # ログ設定
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # 環境変数の確認
    slack_bot_token = os.environ.get("SLACK_BOT_TOKEN")
    slack_app_token = os.environ.get("SLACK_APP_TOKEN")

    if not slack_bot_token:
        raise ValueError("SLACK_BOT_TOKEN environment variable is required")
    if not slack_app_token:
        raise ValueError("SLACK_APP_TOKEN environment variable is required")

    app = create_app()

    # ソケットモードで起動
    handler = SocketModeHandler(app, slack_app_token)
    print("⚡️ Slack app is running in socket mode!")
    handler.start()
