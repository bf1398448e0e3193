from typing import Optional

from lark_sdk.api.base import BaseAPI
from lark_sdk.core.request import Endpoint
from lark_sdk.schemas.im import (
    AddChatMemberReq,
    AddChatMemberResp,
    Chat,
    CreateChatReq,
    GetChatListOfSelfReq,
    GetChatListOfSelfResp,
    GetChatReq,
)

CREATE_CHAT = Endpoint(
    scope="Chat",
    api="CreateChat",
    method="POST",
    path="/open-apis/im/v1/chats",
    query=("user_id_type", "set_bot_manager"),
    body=(
        "avatar",
        "name",
        "description",
        "i18n_names",
        "owner_id",
        "user_id_list",
        "bot_id_list",
        "chat_mode",
        "chat_type",
        "external",
        "join_message_visibility",
        "leave_message_visibility",
        "membership_approval",
    ),
    response=Chat,
    need_tenant_access_token=True,
)
GET_CHAT = Endpoint(
    scope="Chat",
    api="GetChat",
    method="GET",
    path="/open-apis/im/v1/chats/:chat_id",
    query=("user_id_type",),
    response=Chat,
    need_tenant_access_token=True,
    need_user_access_token=True,
)
GET_CHAT_LIST_OF_SELF = Endpoint(
    scope="Chat",
    api="GetChatListOfSelf",
    method="GET",
    path="/open-apis/im/v1/chats",
    query=("user_id_type", "page_token", "page_size"),
    response=GetChatListOfSelfResp,
    need_tenant_access_token=True,
    need_user_access_token=True,
)
ADD_CHAT_MEMBER = Endpoint(
    scope="Chat",
    api="AddChatMember",
    method="POST",
    path="/open-apis/im/v1/chats/:chat_id/members",
    query=("member_id_type", "succeed_type"),
    body=("id_list",),
    response=AddChatMemberResp,
    need_tenant_access_token=True,
    need_user_access_token=True,
)


class ChatAPI(BaseAPI):
    async def create_chat(self, request: CreateChatReq) -> Chat:
        return await self._call(CREATE_CHAT, request)

    async def get_chat(
        self, request: GetChatReq, user_access_token: Optional[str] = None
    ) -> Chat:
        return await self._call(GET_CHAT, request, user_access_token)

    async def get_chat_list_of_self(
        self,
        request: Optional[GetChatListOfSelfReq] = None,
        user_access_token: Optional[str] = None,
    ) -> GetChatListOfSelfResp:
        """获取用户或机器人所在的群列表"""
        return await self._call(
            GET_CHAT_LIST_OF_SELF, request or GetChatListOfSelfReq(), user_access_token
        )

    async def add_chat_member(
        self, request: AddChatMemberReq, user_access_token: Optional[str] = None
    ) -> AddChatMemberResp:
        return await self._call(ADD_CHAT_MEMBER, request, user_access_token)
