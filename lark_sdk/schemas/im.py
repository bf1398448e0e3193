"""机器人、消息、群组、文件相关模型"""

from typing import Any, Dict, List, Optional

from pydantic import Field

from lark_sdk.schemas.base import LarkRequest, LarkResponse, PageResponse

# ---------------------------------------------------------------------------
# Bot
# ---------------------------------------------------------------------------


class GetBotInfoResp(LarkResponse):
    activate_status: int = 0  # 0 初始化, 1 租户停用, 2 租户启用, 3 安装后待启用, ...
    app_name: str = ""
    avatar_url: str = ""
    ip_white_list: List[str] = Field(default_factory=list)
    open_id: str = ""


class AddBotToChatReq(LarkRequest):
    chat_id: str


# ---------------------------------------------------------------------------
# File
# ---------------------------------------------------------------------------


class UploadImageReq(LarkRequest):
    image_type: str = "message"  # message: 用于发送消息, avatar: 用于设置头像
    image: bytes


class UploadImageResp(LarkResponse):
    image_key: str


class DownloadImageReq(LarkRequest):
    image_key: str


class UploadFileReq(LarkRequest):
    file_type: str  # opus / mp4 / pdf / doc / xls / ppt / stream
    file_name: str
    duration: Optional[int] = None  # 毫秒
    file: bytes


class UploadFileResp(LarkResponse):
    file_key: str


class DownloadFileReq(LarkRequest):
    file_key: str


# ---------------------------------------------------------------------------
# Message
# ---------------------------------------------------------------------------


class SendRawMessageReq(LarkRequest):
    receive_id_type: str  # open_id / user_id / union_id / email / chat_id
    receive_id: str
    msg_type: str
    content: str  # JSON 序列化后的消息内容


class ReplyRawMessageReq(LarkRequest):
    message_id: str
    msg_type: str
    content: str


class MessageBody(LarkResponse):
    content: str = ""


class MessageSender(LarkResponse):
    id: str = ""
    id_type: str = ""
    sender_type: str = ""
    tenant_key: str = ""


class Message(LarkResponse):
    message_id: str = ""
    root_id: Optional[str] = None
    parent_id: Optional[str] = None
    msg_type: str = ""
    create_time: str = ""
    update_time: str = ""
    deleted: bool = False
    updated: bool = False
    chat_id: str = ""
    sender: Optional[MessageSender] = None
    body: Optional[MessageBody] = None


class GetMessageReq(LarkRequest):
    message_id: str


class GetMessageResp(LarkResponse):
    items: List[Message] = Field(default_factory=list)


class DeleteMessageReq(LarkRequest):
    message_id: str


class GetMessageListReq(LarkRequest):
    container_id_type: str = "chat"
    container_id: str
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    page_token: Optional[str] = None
    page_size: Optional[int] = None


class GetMessageListResp(PageResponse):
    items: List[Message] = Field(default_factory=list)


class GetMessageFileReq(LarkRequest):
    message_id: str
    file_key: str
    type: str  # image / file


class SendCustomBotMessageReq(LarkRequest):
    msg_type: str
    content: Optional[Dict[str, Any]] = None
    card: Optional[Dict[str, Any]] = None


# ---------------------------------------------------------------------------
# Chat
# ---------------------------------------------------------------------------


class CreateChatReq(LarkRequest):
    user_id_type: Optional[str] = None
    set_bot_manager: Optional[bool] = None
    avatar: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    i18n_names: Optional[Dict[str, str]] = None
    owner_id: Optional[str] = None
    user_id_list: Optional[List[str]] = None
    bot_id_list: Optional[List[str]] = None
    chat_mode: Optional[str] = None
    chat_type: Optional[str] = None  # private / public
    external: Optional[bool] = None
    join_message_visibility: Optional[str] = None
    leave_message_visibility: Optional[str] = None
    membership_approval: Optional[str] = None


class Chat(LarkResponse):
    chat_id: str = ""
    avatar: str = ""
    name: str = ""
    description: str = ""
    owner_id: str = ""
    owner_id_type: str = ""
    external: bool = False
    tenant_key: str = ""


class GetChatReq(LarkRequest):
    chat_id: str
    user_id_type: Optional[str] = None


class GetChatListOfSelfReq(LarkRequest):
    user_id_type: Optional[str] = None
    page_token: Optional[str] = None
    page_size: Optional[int] = None


class GetChatListOfSelfResp(PageResponse):
    items: List[Chat] = Field(default_factory=list)


class AddChatMemberReq(LarkRequest):
    chat_id: str
    member_id_type: Optional[str] = None
    succeed_type: Optional[int] = None  # 0 跳过不可用成员, 1 全部失败, 2 ...
    id_list: List[str]


class AddChatMemberResp(LarkResponse):
    invalid_id_list: List[str] = Field(default_factory=list)
    not_existed_id_list: List[str] = Field(default_factory=list)
