from typing import Optional

from lark_sdk.api.base import BaseAPI
from lark_sdk.core.request import Endpoint
from lark_sdk.schemas.platform import GetJssdkTicketResp

GET_JSSDK_TICKET = Endpoint(
    scope="Jssdk",
    api="GetJssdkTicket",
    method="POST",
    path="/open-apis/jssdk/ticket/get",
    response=GetJssdkTicketResp,
    need_app_access_token=True,
    need_user_access_token=True,
)


class JssdkAPI(BaseAPI):
    async def get_jssdk_ticket(
        self, user_access_token: Optional[str] = None
    ) -> GetJssdkTicketResp:
        """获取网页组件 jsapi_ticket（有 user_access_token 时优先使用，否则使用 app_access_token）"""
        return await self._call(GET_JSSDK_TICKET, user_access_token=user_access_token)
