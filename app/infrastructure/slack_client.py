class SlackClient:
    """
    Thin facade over Slack WebClient.
    Accepts an object exposing methods compatible with slack_sdk.WebClient.
    """

    def __init__(self, web_client):
        self._client = web_client

    # --- Views ---
    def open_view(self, trigger_id, view):
        return self._client.views_open(trigger_id=trigger_id, view=view)

    def update_view(self, view_id, view):
        return self._client.views_update(view_id=view_id, view=view)

    # --- Chat ---
    def post_message(self, channel, text):
        return self._client.chat_postMessage(channel=channel, text=text)
