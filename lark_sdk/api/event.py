from typing import Optional

from lark_sdk.api.base import BaseAPI
from lark_sdk.core.request import Endpoint
from lark_sdk.schemas.platform import (
    GetEventOutboundIpListReq,
    GetEventOutboundIpListResp,
)

GET_EVENT_OUTBOUND_IP_LIST = Endpoint(
    scope="Event",
    api="GetEventOutboundIpList",
    method="GET",
    path="/open-apis/event/v1/outbound_ip",
    query=("page_size", "page_token"),
    response=GetEventOutboundIpListResp,
    need_tenant_access_token=True,
)


class EventAPI(BaseAPI):
    async def get_event_outbound_ip_list(
        self, request: Optional[GetEventOutboundIpListReq] = None
    ) -> GetEventOutboundIpListResp:
        """
        获取事件推送的出口 IP 段

        IP 段可能变更，需要配置防火墙的企业应定期拉取。
        """
        return await self._call(
            GET_EVENT_OUTBOUND_IP_LIST, request or GetEventOutboundIpListReq()
        )
