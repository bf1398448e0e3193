from typing import Optional

from lark_sdk.schemas.base import LarkRequest, LarkResponse


class TokenExpire(LarkResponse):
    token: str
    expire: int  # 有效期，单位秒


class GetAccessTokenReq(LarkRequest):
    app_id: Optional[str] = None
    app_secret: Optional[str] = None
    app_ticket: Optional[str] = None
    app_access_token: Optional[str] = None
    tenant_key: Optional[str] = None


class GetAccessTokenResp(LarkResponse):
    # 鉴权接口不使用 data 包装，token 直接位于顶层
    code: int = 0
    msg: str = ""
    tenant_access_token: Optional[str] = None
    app_access_token: Optional[str] = None
    expire: int = 0


class ResendAppTicketReq(LarkRequest):
    app_id: Optional[str] = None
    app_secret: Optional[str] = None
