"""
HelpdeskAPI - 服务台

所有接口同时需要 tenant_access_token 和服务台凭证头
X-Lark-Helpdesk-Authorization: base64("{LARK_HELPDESK_ID}:{LARK_HELPDESK_TOKEN}")
"""

from lark_sdk.api.base import BaseAPI
from lark_sdk.core.request import Endpoint
from lark_sdk.schemas.base import DownloadResponse
from lark_sdk.schemas.helpdesk import (
    DownloadHelpdeskTicketImageReq,
    GetHelpdeskTicketListReq,
    GetHelpdeskTicketListResp,
    GetHelpdeskTicketMessageListReq,
    GetHelpdeskTicketMessageListResp,
    GetHelpdeskTicketReq,
    GetHelpdeskTicketResp,
    SendHelpdeskTicketMessageReq,
    SendHelpdeskTicketMessageResp,
    StartHelpdeskServiceReq,
    StartHelpdeskServiceResp,
)

START_HELPDESK_SERVICE = Endpoint(
    scope="Helpdesk",
    api="StartHelpdeskService",
    method="POST",
    path="/open-apis/helpdesk/v1/start_service",
    body=("human_service", "appointed_agents", "open_id", "customized_info"),
    response=StartHelpdeskServiceResp,
    need_tenant_access_token=True,
    need_helpdesk_auth=True,
)
GET_HELPDESK_TICKET = Endpoint(
    scope="Helpdesk",
    api="GetHelpdeskTicket",
    method="GET",
    path="/open-apis/helpdesk/v1/tickets/:ticket_id",
    response=GetHelpdeskTicketResp,
    need_tenant_access_token=True,
    need_helpdesk_auth=True,
)
GET_HELPDESK_TICKET_LIST = Endpoint(
    scope="Helpdesk",
    api="GetHelpdeskTicketList",
    method="GET",
    path="/open-apis/helpdesk/v1/tickets",
    query=(
        "ticket_id",
        "agent_id",
        "closed_by_id",
        "type",
        "channel",
        "solved",
        "score",
        "status_list",
        "guest_name",
        "guest_id",
        "tags",
        "page",
        "page_size",
        "create_time_start",
        "create_time_end",
        "update_time_start",
        "update_time_end",
    ),
    response=GetHelpdeskTicketListResp,
    need_tenant_access_token=True,
    need_helpdesk_auth=True,
)
GET_HELPDESK_TICKET_MESSAGE_LIST = Endpoint(
    scope="Helpdesk",
    api="GetHelpdeskTicketMessageList",
    method="GET",
    path="/open-apis/helpdesk/v1/tickets/:ticket_id/messages",
    query=("time_start", "time_end", "page", "page_size"),
    response=GetHelpdeskTicketMessageListResp,
    need_tenant_access_token=True,
    need_helpdesk_auth=True,
)
SEND_HELPDESK_TICKET_MESSAGE = Endpoint(
    scope="Helpdesk",
    api="SendHelpdeskTicketMessage",
    method="POST",
    path="/open-apis/helpdesk/v1/tickets/:ticket_id/messages",
    body=("msg_type", "content"),
    response=SendHelpdeskTicketMessageResp,
    need_tenant_access_token=True,
    need_helpdesk_auth=True,
)
DOWNLOAD_HELPDESK_TICKET_IMAGE = Endpoint(
    scope="Helpdesk",
    api="DownloadHelpdeskTicketImage",
    method="GET",
    path="/open-apis/helpdesk/v1/ticket_images",
    query=("ticket_id", "msg_id", "index"),
    response=DownloadResponse,
    need_tenant_access_token=True,
    need_helpdesk_auth=True,
    is_file_download=True,
)


class HelpdeskAPI(BaseAPI):
    async def start_helpdesk_service(
        self, request: StartHelpdeskServiceReq
    ) -> StartHelpdeskServiceResp:
        """创建服务台对话，返回对话所在的 chat_id"""
        return await self._call(START_HELPDESK_SERVICE, request)

    async def get_helpdesk_ticket(
        self, request: GetHelpdeskTicketReq
    ) -> GetHelpdeskTicketResp:
        return await self._call(GET_HELPDESK_TICKET, request)

    async def get_helpdesk_ticket_list(
        self, request: GetHelpdeskTicketListReq
    ) -> GetHelpdeskTicketListResp:
        return await self._call(GET_HELPDESK_TICKET_LIST, request)

    async def get_helpdesk_ticket_message_list(
        self, request: GetHelpdeskTicketMessageListReq
    ) -> GetHelpdeskTicketMessageListResp:
        return await self._call(GET_HELPDESK_TICKET_MESSAGE_LIST, request)

    async def send_helpdesk_ticket_message(
        self, request: SendHelpdeskTicketMessageReq
    ) -> SendHelpdeskTicketMessageResp:
        return await self._call(SEND_HELPDESK_TICKET_MESSAGE, request)

    async def download_helpdesk_ticket_image(
        self, request: DownloadHelpdeskTicketImageReq
    ) -> DownloadResponse:
        return await self._call(DOWNLOAD_HELPDESK_TICKET_IMAGE, request)
