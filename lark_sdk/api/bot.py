from lark_sdk.api.base import BaseAPI
from lark_sdk.core.request import Endpoint
from lark_sdk.schemas.base import EmptyResponse
from lark_sdk.schemas.im import AddBotToChatReq, GetBotInfoResp

# 该接口响应中机器人信息位于 bot 字段，由 Lark.raw_request 特殊处理
GET_BOT_INFO = Endpoint(
    scope="Bot",
    api="GetBotInfo",
    method="GET",
    path="/open-apis/bot/v3/info",
    response=GetBotInfoResp,
    need_tenant_access_token=True,
)
ADD_BOT_TO_CHAT = Endpoint(
    scope="Bot",
    api="AddBotToChat",
    method="POST",
    path="/open-apis/bot/v4/add",
    body=("chat_id",),
    response=EmptyResponse,
    need_tenant_access_token=True,
)


class BotAPI(BaseAPI):
    async def get_bot_info(self) -> GetBotInfoResp:
        """获取机器人的基本信息（需要开启机器人能力）"""
        return await self._call(GET_BOT_INFO)

    async def add_bot_to_chat(self, request: AddBotToChatReq) -> EmptyResponse:
        """拉机器人进群（旧版接口）"""
        return await self._call(ADD_BOT_TO_CHAT, request)
