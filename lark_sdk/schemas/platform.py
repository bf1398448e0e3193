"""企业信息、事件、登录态、JSSDK、通讯录相关模型"""

from typing import List, Optional

from pydantic import Field

from lark_sdk.schemas.base import LarkRequest, LarkResponse, PageResponse


class TenantAvatar(LarkResponse):
    avatar_origin: str = ""
    avatar_72: str = ""
    avatar_240: str = ""
    avatar_640: str = ""


class Tenant(LarkResponse):
    name: str = ""
    display_id: str = ""
    tenant_tag: int = 0  # 0: 团队版, 2: 个人版
    tenant_key: str = ""
    avatar: Optional[TenantAvatar] = None


class GetTenantResp(LarkResponse):
    tenant: Tenant


class GetEventOutboundIpListReq(LarkRequest):
    page_size: Optional[int] = None
    page_token: Optional[str] = None


class GetEventOutboundIpListResp(PageResponse):
    ip_list: List[str] = Field(default_factory=list)


class GetPassportSessionReq(LarkRequest):
    user_id_type: Optional[str] = None
    user_ids: Optional[List[str]] = None


class PassportMaskSession(LarkResponse):
    create_time: str = ""
    terminal_type: int = 0  # 0 未知, 1 个人电脑, 2 浏览器, 3 安卓, 4 Apple, 5 服务端
    user_id: str = ""


class GetPassportSessionResp(LarkResponse):
    mask_sessions: List[PassportMaskSession] = Field(default_factory=list)


class GetJssdkTicketResp(LarkResponse):
    expire_in: int = 0
    ticket: str = ""


# ---------------------------------------------------------------------------
# Contact
# ---------------------------------------------------------------------------


class GetUserReq(LarkRequest):
    user_id: str
    user_id_type: Optional[str] = None
    department_id_type: Optional[str] = None


class UserAvatar(LarkResponse):
    avatar_72: str = ""
    avatar_240: str = ""
    avatar_640: str = ""
    avatar_origin: str = ""


class User(LarkResponse):
    union_id: str = ""
    user_id: str = ""
    open_id: str = ""
    name: str = ""
    en_name: str = ""
    email: str = ""
    mobile: str = ""
    avatar: Optional[UserAvatar] = None
    department_ids: List[str] = Field(default_factory=list)


class GetUserResp(LarkResponse):
    user: User


class BatchGetUserByIDReq(LarkRequest):
    user_id_type: Optional[str] = None
    emails: Optional[List[str]] = None
    mobiles: Optional[List[str]] = None


class UserIDItem(LarkResponse):
    user_id: Optional[str] = None
    mobile: Optional[str] = None
    email: Optional[str] = None


class BatchGetUserByIDResp(LarkResponse):
    user_list: List[UserIDItem] = Field(default_factory=list)


class GetDepartmentReq(LarkRequest):
    department_id: str
    user_id_type: Optional[str] = None
    department_id_type: Optional[str] = None


class Department(LarkResponse):
    name: str = ""
    department_id: str = ""
    open_department_id: str = ""
    parent_department_id: str = ""
    leader_user_id: str = ""
    member_count: int = 0


class GetDepartmentResp(LarkResponse):
    department: Department
