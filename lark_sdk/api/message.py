"""
MessageAPI - 消息接口

- 发送 / 回复 / 获取 / 撤回消息
- 获取会话历史消息
- 下载消息中的资源文件
- 自定义机器人 webhook（可选签名校验）
"""

import base64
import hashlib
import hmac
import logging
import time
from typing import Any, Dict, Optional

from lark_sdk.api.base import BaseAPI
from lark_sdk.core.request import Endpoint, RawRequestReq
from lark_sdk.schemas.base import DownloadResponse, EmptyResponse
from lark_sdk.schemas.im import (
    DeleteMessageReq,
    GetMessageFileReq,
    GetMessageListReq,
    GetMessageListResp,
    GetMessageReq,
    GetMessageResp,
    Message,
    ReplyRawMessageReq,
    SendCustomBotMessageReq,
    SendRawMessageReq,
)

logger = logging.getLogger(__name__)

SEND_RAW_MESSAGE = Endpoint(
    scope="Message",
    api="SendRawMessage",
    method="POST",
    path="/open-apis/im/v1/messages",
    query=("receive_id_type",),
    body=("receive_id", "content", "msg_type"),
    response=Message,
    need_tenant_access_token=True,
)
REPLY_RAW_MESSAGE = Endpoint(
    scope="Message",
    api="ReplyRawMessage",
    method="POST",
    path="/open-apis/im/v1/messages/:message_id/reply",
    body=("content", "msg_type"),
    response=Message,
    need_tenant_access_token=True,
)
GET_MESSAGE = Endpoint(
    scope="Message",
    api="GetMessage",
    method="GET",
    path="/open-apis/im/v1/messages/:message_id",
    response=GetMessageResp,
    need_tenant_access_token=True,
)
DELETE_MESSAGE = Endpoint(
    scope="Message",
    api="DeleteMessage",
    method="DELETE",
    path="/open-apis/im/v1/messages/:message_id",
    response=EmptyResponse,
    need_tenant_access_token=True,
    need_user_access_token=True,
)
GET_MESSAGE_LIST = Endpoint(
    scope="Message",
    api="GetMessageList",
    method="GET",
    path="/open-apis/im/v1/messages",
    query=(
        "container_id_type",
        "container_id",
        "start_time",
        "end_time",
        "page_token",
        "page_size",
    ),
    response=GetMessageListResp,
    need_tenant_access_token=True,
)
GET_MESSAGE_FILE = Endpoint(
    scope="Message",
    api="GetMessageFile",
    method="GET",
    path="/open-apis/im/v1/messages/:message_id/resources/:file_key",
    query=("type",),
    response=DownloadResponse,
    need_tenant_access_token=True,
    is_file_download=True,
)


def at_all() -> str:
    """文本消息中 @所有人"""
    return '<at user_id="all"></at>'


def at_open_id(open_id: str) -> str:
    return f'<at user_id="{open_id}"></at>'


def gen_custom_bot_sign(timestamp: int, secret: str) -> str:
    """自定义机器人签名: base64(hmac_sha256(key="{timestamp}\\n{secret}", msg=""))"""
    string_to_sign = f"{timestamp}\n{secret}"
    digest = hmac.new(
        string_to_sign.encode("utf-8"), digestmod=hashlib.sha256
    ).digest()
    return base64.b64encode(digest).decode("utf-8")


class MessageAPI(BaseAPI):
    at_all = staticmethod(at_all)
    at_open_id = staticmethod(at_open_id)

    async def send_raw_message(self, request: SendRawMessageReq) -> Message:
        """
        发送消息

        content 为 JSON 序列化后的字符串，例如文本消息:
            json.dumps({"text": "hello " + at_all()})
        """
        return await self._call(SEND_RAW_MESSAGE, request)

    async def reply_raw_message(self, request: ReplyRawMessageReq) -> Message:
        return await self._call(REPLY_RAW_MESSAGE, request)

    async def get_message(self, request: GetMessageReq) -> GetMessageResp:
        return await self._call(GET_MESSAGE, request)

    async def delete_message(
        self, request: DeleteMessageReq, user_access_token: Optional[str] = None
    ) -> EmptyResponse:
        """撤回消息，机器人只能撤回自己发送的消息"""
        return await self._call(DELETE_MESSAGE, request, user_access_token)

    async def get_message_list(self, request: GetMessageListReq) -> GetMessageListResp:
        return await self._call(GET_MESSAGE_LIST, request)

    async def get_message_file(self, request: GetMessageFileReq) -> DownloadResponse:
        return await self._call(GET_MESSAGE_FILE, request)

    async def send_custom_bot_message(
        self, request: SendCustomBotMessageReq
    ) -> Dict[str, Any]:
        """
        通过自定义机器人 webhook 发送消息

        LARK_CUSTOM_BOT_SECRET 配置时附带 timestamp 与 sign 字段。
        webhook 不需要任何 access token。

        Raises:
            ValueError: 未配置 LARK_CUSTOM_BOT_URL
        """
        settings = self._lark.settings
        if not settings.LARK_CUSTOM_BOT_URL:
            raise ValueError("LARK_CUSTOM_BOT_URL 未配置，无法发送自定义机器人消息")

        body: Dict[str, Any] = {}
        if settings.LARK_CUSTOM_BOT_SECRET:
            timestamp = int(time.time())
            body["timestamp"] = str(timestamp)
            body["sign"] = gen_custom_bot_sign(
                timestamp, settings.LARK_CUSTOM_BOT_SECRET
            )
        body.update(request.model_dump(exclude_none=True))

        req = RawRequestReq(
            scope="Message",
            api="SendCustomBotMessage",
            method="POST",
            url=settings.LARK_CUSTOM_BOT_URL,
            body=body,
        )
        return await self._lark.raw_request(req)
