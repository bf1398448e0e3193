"""
AuthAPI - 应用凭证接口

获取 token 本身也是一次普通请求，经 Lark.raw_request 分发，不需要任何鉴权头。

- 自建应用: POST /open-apis/auth/v3/tenant_access_token/internal
- 自建应用: POST /open-apis/auth/v3/app_access_token/internal
- 商店应用: POST /open-apis/auth/v3/app_access_token
- 商店应用: POST /open-apis/auth/v3/tenant_access_token
- 商店应用: POST /open-apis/auth/v3/app_ticket/resend
"""

import logging

from lark_sdk.api.base import BaseAPI
from lark_sdk.core.request import Endpoint
from lark_sdk.schemas.auth import (
    GetAccessTokenReq,
    GetAccessTokenResp,
    ResendAppTicketReq,
    TokenExpire,
)
from lark_sdk.schemas.base import EmptyResponse

logger = logging.getLogger(__name__)

GET_TENANT_ACCESS_TOKEN = Endpoint(
    scope="Auth",
    api="GetTenantAccessToken",
    method="POST",
    path="/open-apis/auth/v3/tenant_access_token/internal",
    body=("app_id", "app_secret"),
    response=GetAccessTokenResp,
)
GET_APP_ACCESS_TOKEN = Endpoint(
    scope="Auth",
    api="GetAppAccessToken",
    method="POST",
    path="/open-apis/auth/v3/app_access_token/internal",
    body=("app_id", "app_secret"),
    response=GetAccessTokenResp,
)
GET_ISV_APP_ACCESS_TOKEN = Endpoint(
    scope="Auth",
    api="GetAppAccessToken",
    method="POST",
    path="/open-apis/auth/v3/app_access_token",
    body=("app_id", "app_secret", "app_ticket"),
    response=GetAccessTokenResp,
)
GET_ISV_TENANT_ACCESS_TOKEN = Endpoint(
    scope="Auth",
    api="GetTenantAccessToken",
    method="POST",
    path="/open-apis/auth/v3/tenant_access_token",
    body=("app_access_token", "tenant_key"),
    response=GetAccessTokenResp,
)
RESEND_APP_TICKET = Endpoint(
    scope="Auth",
    api="ResendAppTicket",
    method="POST",
    path="/open-apis/auth/v3/app_ticket/resend",
    body=("app_id", "app_secret"),
    response=EmptyResponse,
)


class AuthAPI(BaseAPI):
    def _credentials(self) -> dict:
        settings = self._lark.settings
        return {"app_id": settings.LARK_APP_ID, "app_secret": settings.LARK_APP_SECRET}

    async def get_tenant_access_token(self) -> TokenExpire:
        """自建应用获取 tenant_access_token（不走缓存，缓存由 TokenManager 负责）"""
        resp = await self._call(
            GET_TENANT_ACCESS_TOKEN, GetAccessTokenReq(**self._credentials())
        )
        return TokenExpire(token=resp.tenant_access_token or "", expire=resp.expire)

    async def get_app_access_token(self) -> TokenExpire:
        resp = await self._call(
            GET_APP_ACCESS_TOKEN, GetAccessTokenReq(**self._credentials())
        )
        return TokenExpire(token=resp.app_access_token or "", expire=resp.expire)

    async def get_isv_app_access_token(self, app_ticket: str) -> TokenExpire:
        resp = await self._call(
            GET_ISV_APP_ACCESS_TOKEN,
            GetAccessTokenReq(app_ticket=app_ticket, **self._credentials()),
        )
        return TokenExpire(token=resp.app_access_token or "", expire=resp.expire)

    async def get_isv_tenant_access_token(
        self, app_access_token: str, tenant_key: str
    ) -> TokenExpire:
        resp = await self._call(
            GET_ISV_TENANT_ACCESS_TOKEN,
            GetAccessTokenReq(app_access_token=app_access_token, tenant_key=tenant_key),
        )
        return TokenExpire(token=resp.tenant_access_token or "", expire=resp.expire)

    async def resend_app_ticket(self) -> EmptyResponse:
        """触发开放平台重新推送 app_ticket 事件"""
        logger.info("Requesting app_ticket resend")
        return await self._call(
            RESEND_APP_TICKET, ResendAppTicketReq(**self._credentials())
        )
