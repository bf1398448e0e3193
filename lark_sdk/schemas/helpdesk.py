from typing import Any, Dict, List, Optional

from pydantic import Field

from lark_sdk.schemas.base import LarkRequest, LarkResponse


class StartHelpdeskServiceReq(LarkRequest):
    human_service: Optional[bool] = None  # 是否直接进入人工
    appointed_agents: Optional[List[str]] = None  # 客服 open ids
    open_id: str
    customized_info: Optional[str] = None


class StartHelpdeskServiceResp(LarkResponse):
    chat_id: str = ""


class HelpdeskUser(LarkResponse):
    id: str = ""
    avatar_url: str = ""
    name: str = ""
    email: str = ""


class HelpdeskTicket(LarkResponse):
    ticket_id: str = ""
    helpdesk_id: str = ""
    guest: Optional[HelpdeskUser] = None
    stage: int = 0
    status: int = 0  # 1 已创建, 2 处理中, 3 排队中, 4 待定, 5 待用户响应, 50 被机器人关闭, 51 被客服关闭
    score: int = 0
    created_at: int = 0
    updated_at: int = 0
    closed_at: int = 0
    channel: int = 0
    solve: int = 0
    customized_info: str = ""


class GetHelpdeskTicketReq(LarkRequest):
    ticket_id: str


class GetHelpdeskTicketResp(LarkResponse):
    ticket: HelpdeskTicket


class GetHelpdeskTicketListReq(LarkRequest):
    ticket_id: Optional[str] = None
    agent_id: Optional[str] = None
    closed_by_id: Optional[str] = None
    type: Optional[int] = None  # 1 bot, 2 人工
    channel: Optional[int] = None
    solved: Optional[int] = None
    score: Optional[int] = None
    status_list: Optional[List[int]] = None
    guest_name: Optional[str] = None
    guest_id: Optional[str] = None
    tags: Optional[List[str]] = None
    page: Optional[int] = None
    page_size: Optional[int] = None
    create_time_start: Optional[int] = None
    create_time_end: Optional[int] = None
    update_time_start: Optional[int] = None
    update_time_end: Optional[int] = None


class GetHelpdeskTicketListResp(LarkResponse):
    total: int = 0
    tickets: List[HelpdeskTicket] = Field(default_factory=list)


class GetHelpdeskTicketMessageListReq(LarkRequest):
    ticket_id: str
    time_start: Optional[int] = None
    time_end: Optional[int] = None
    page: Optional[int] = None
    page_size: Optional[int] = None


class HelpdeskTicketMessage(LarkResponse):
    id: str = ""
    message_id: str = ""
    message_type: str = ""
    created_at: int = 0
    content: str = ""
    user_name: str = ""
    avatar_url: str = ""
    user_id: str = ""


class GetHelpdeskTicketMessageListResp(LarkResponse):
    total: int = 0
    messages: List[HelpdeskTicketMessage] = Field(default_factory=list)


class SendHelpdeskTicketMessageReq(LarkRequest):
    ticket_id: str
    msg_type: str
    content: Dict[str, Any]


class SendHelpdeskTicketMessageResp(LarkResponse):
    message_id: str = ""


class DownloadHelpdeskTicketImageReq(LarkRequest):
    ticket_id: str
    msg_id: str
    index: Optional[int] = None
