import asyncio
import base64
import logging
from typing import TYPE_CHECKING, Awaitable, Callable, Dict, Optional

import httpx

from lark_sdk.core.context import user_access_token_context
from lark_sdk.core.errors import LarkError
from lark_sdk.core.request import RawRequestReq
from lark_sdk.schemas.auth import TokenExpire

if TYPE_CHECKING:
    from lark_sdk.core.client import Lark

logger = logging.getLogger(__name__)

# app_ticket 由开放平台每小时推送一次
APP_TICKET_TTL = 3600

HELPDESK_AUTH_HEADER = "X-Lark-Helpdesk-Authorization"

_TOKEN_APIS = {"tenant": "GetTenantAccessToken", "app": "GetAppAccessToken"}


def _mask_token(token: str, visible_chars: int = 4) -> str:
    """对 token 进行脱敏处理，仅显示前几个字符"""
    if not token or len(token) <= visible_chars:
        return "***"
    return f"{token[:visible_chars]}***"


class TokenManager:
    """
    tenant_access_token / app_access_token 管理

    - 先查 Store，未命中时通过 AuthAPI 获取（同样经过 Lark.raw_request）
    - 每种凭证一把锁，同一时刻只有一个刷新请求在途，其余协程等待后直接读 Store
    - ISV 应用使用 app_ticket 换取 app_access_token，再用 tenant_key 换取 tenant_access_token
    """

    def __init__(self, lark: "Lark"):
        self._lark = lark
        self._locks: Dict[str, asyncio.Lock] = {
            "tenant": asyncio.Lock(),
            "app": asyncio.Lock(),
        }

    @property
    def _settings(self):
        return self._lark.settings

    def _key(self, kind: str) -> str:
        app_id = self._settings.LARK_APP_ID or ""
        if kind == "tenant":
            return f"lark:tenant_access_token:{app_id}:{self._settings.LARK_TENANT_KEY or ''}"
        return f"lark:{kind}:{app_id}"

    def _require_credentials(self) -> None:
        if not self._settings.LARK_APP_ID or not self._settings.LARK_APP_SECRET:
            logger.error("LARK_APP_ID / LARK_APP_SECRET not configured")
            raise ValueError(
                "LARK_APP_ID 和 LARK_APP_SECRET 未配置，无法获取 access token"
            )

    async def get_tenant_access_token(self) -> str:
        return await self._get_token("tenant", self._fetch_tenant_access_token)

    async def get_app_access_token(self) -> str:
        return await self._get_token("app", self._fetch_app_access_token)

    async def _get_token(
        self, kind: str, fetch: Callable[[], Awaitable[TokenExpire]]
    ) -> str:
        key = self._key(kind)
        token, ttl = await self._lark.store.get(key)
        if token:
            logger.debug("Using cached %s token (expires in %d seconds)", kind, ttl)
            return token

        async with self._locks[kind]:
            # 等锁期间可能已被其他协程刷新
            token, ttl = await self._lark.store.get(key)
            if token:
                logger.debug("Using %s token refreshed by another task", kind)
                return token

            self._require_credentials()
            result = await fetch()
            if not result.token:
                logger.error("Empty %s access token returned by open platform", kind)
                raise LarkError(
                    "Auth", _TOKEN_APIS[kind], -1, f"{kind} access token is empty"
                )
            await self._lark.store.set(key, result.token, result.expire)
            logger.info(
                "Refreshed %s access token: %s (expires in %d seconds)",
                kind,
                _mask_token(result.token),
                result.expire,
            )
            return result.token

    async def _fetch_tenant_access_token(self) -> TokenExpire:
        if not self._settings.LARK_IS_ISV:
            return await self._lark.auth.get_tenant_access_token()

        if not self._settings.LARK_TENANT_KEY:
            logger.error("ISV app requires LARK_TENANT_KEY")
            raise ValueError("ISV 应用获取 tenant_access_token 需要配置 LARK_TENANT_KEY")
        app_access_token = await self.get_app_access_token()
        return await self._lark.auth.get_isv_tenant_access_token(
            app_access_token, self._settings.LARK_TENANT_KEY
        )

    async def _fetch_app_access_token(self) -> TokenExpire:
        if not self._settings.LARK_IS_ISV:
            return await self._lark.auth.get_app_access_token()

        app_ticket = await self.get_app_ticket()
        if not app_ticket:
            # 请求开放平台重新推送 app_ticket，本次调用仍然失败
            logger.error("app_ticket not found in store, requesting resend")
            await self._lark.auth.resend_app_ticket()
            raise LarkError(
                "Auth", "GetAppAccessToken", -1, "app_ticket is empty, resend requested"
            )
        return await self._lark.auth.get_isv_app_access_token(app_ticket)

    async def get_app_ticket(self) -> str:
        ticket, _ = await self._lark.store.get(self._key("app_ticket"))
        return ticket

    async def set_app_ticket(self, app_ticket: str) -> None:
        """保存开放平台推送的 app_ticket（ISV 应用）"""
        await self._lark.store.set(self._key("app_ticket"), app_ticket, APP_TICKET_TTL)
        logger.info("Stored app_ticket: %s", _mask_token(app_ticket))


class LarkAuth(httpx.Auth):
    """
    按 RawRequestReq 的能力标记注入鉴权头

    - user_access_token: 单次调用参数 > 上下文 > LARK_USER_ACCESS_TOKEN
    - 需要 user token 且存在时直接使用，否则依次尝试 tenant / app token
    - need_helpdesk_auth 时额外附加服务台凭证头
    """

    def __init__(
        self, lark: "Lark", req: RawRequestReq, user_access_token: Optional[str] = None
    ):
        self._lark = lark
        self._req = req
        self._user_access_token = user_access_token

    async def async_auth_flow(self, request: httpx.Request):
        req = self._req
        settings = self._lark.settings
        user_token = (
            self._user_access_token
            or user_access_token_context.get()
            or settings.LARK_USER_ACCESS_TOKEN
        )

        if req.need_user_access_token and user_token:
            logger.debug("Using user_access_token: %s", _mask_token(user_token))
            request.headers["Authorization"] = f"Bearer {user_token}"
        elif req.need_tenant_access_token:
            token = await self._lark.token_manager.get_tenant_access_token()
            request.headers["Authorization"] = f"Bearer {token}"
        elif req.need_app_access_token:
            token = await self._lark.token_manager.get_app_access_token()
            request.headers["Authorization"] = f"Bearer {token}"
        elif req.need_user_access_token:
            logger.warning(
                "%s#%s requires user_access_token but none was provided",
                req.scope,
                req.api,
            )

        if req.need_helpdesk_auth:
            if not settings.LARK_HELPDESK_ID or not settings.LARK_HELPDESK_TOKEN:
                logger.error("%s#%s requires helpdesk credentials", req.scope, req.api)
                raise ValueError(
                    "LARK_HELPDESK_ID 和 LARK_HELPDESK_TOKEN 未配置，无法调用服务台接口"
                )
            credential = f"{settings.LARK_HELPDESK_ID}:{settings.LARK_HELPDESK_TOKEN}"
            request.headers[HELPDESK_AUTH_HEADER] = base64.b64encode(
                credential.encode("utf-8")
            ).decode("ascii")

        yield request
