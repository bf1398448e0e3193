import json
import logging
from typing import Any, Dict, Optional, Tuple

import httpx
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from lark_sdk.api import (
    AppLinkAPI,
    AuthAPI,
    BitableAPI,
    BotAPI,
    ChatAPI,
    ContactAPI,
    EventAPI,
    FileAPI,
    HelpdeskAPI,
    JssdkAPI,
    MessageAPI,
    PassportAPI,
    TenantAPI,
)
from lark_sdk.core.auth import LarkAuth, TokenManager
from lark_sdk.core.config import Settings
from lark_sdk.core.errors import LarkError
from lark_sdk.core.request import Endpoint, RawRequestReq, ResponseMeta
from lark_sdk.core.store import MemoryStore, Store
from lark_sdk.schemas.base import LarkResponse

logger = logging.getLogger(__name__)

# 只重试尚未发出请求的连接类错误，避免非幂等请求被重复执行
RETRYABLE_EXCEPTIONS = (
    httpx.ConnectError,
    httpx.ConnectTimeout,
)

_OPTION_SETTINGS = {
    "app_id": "LARK_APP_ID",
    "app_secret": "LARK_APP_SECRET",
    "encrypt_key": "LARK_ENCRYPT_KEY",
    "verification_token": "LARK_VERIFICATION_TOKEN",
    "helpdesk_id": "LARK_HELPDESK_ID",
    "helpdesk_token": "LARK_HELPDESK_TOKEN",
    "custom_url": "LARK_CUSTOM_BOT_URL",
    "custom_secret": "LARK_CUSTOM_BOT_SECRET",
    "is_isv": "LARK_IS_ISV",
    "tenant_key": "LARK_TENANT_KEY",
    "open_base_url": "LARK_OPEN_BASE_URL",
    "timeout": "LARK_TIMEOUT",
    "max_retries": "LARK_MAX_RETRIES",
    "user_access_token": "LARK_USER_ACCESS_TOKEN",
}


def _mask_app_id(app_id: Optional[str]) -> str:
    """对 app_id 进行脱敏处理，仅显示前 4 位"""
    if not app_id or len(app_id) <= 4:
        return "***"
    return f"{app_id[:4]}***"


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def encode_multipart(body: Dict[str, Any]) -> Tuple[Dict[str, str], Dict[str, Any]]:
    """
    将 body 拆分为 multipart 的表单字段和文件字段

    bytes / bytearray / 文件对象原样放入 files，其余值转为字符串放入 data。
    """
    data: Dict[str, str] = {}
    files: Dict[str, Any] = {}
    for key, value in body.items():
        if value is None:
            continue
        if isinstance(value, (bytes, bytearray)) or hasattr(value, "read"):
            filename = body.get("file_name") if key == "file" else None
            files[key] = (filename or key, value)
        else:
            data[key] = _stringify(value)
    return data, files


class Lark:
    """
    飞书开放平台客户端

    持有配置、token 存储、共享的 httpx.AsyncClient 以及所有接口模块：
    - lark.auth / lark.bot / lark.tenant / lark.event / lark.passport / lark.jssdk
    - lark.file / lark.message / lark.chat / lark.contact
    - lark.bitable / lark.helpdesk / lark.applink

    Usage:
        async with Lark(app_id="cli_xxx", app_secret="xxx") as lark:
            info = await lark.bot.get_bot_info()
            print(info.request_id)
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        store: Optional[Store] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        **options: Any,
    ):
        unknown = set(options) - set(_OPTION_SETTINGS)
        if unknown:
            raise TypeError(f"unexpected options: {', '.join(sorted(unknown))}")

        settings = settings or Settings()
        overrides = {
            _OPTION_SETTINGS[name]: value
            for name, value in options.items()
            if value is not None
        }
        if overrides:
            # 重新校验，保证 "false" / "1" 之类的参数按字段类型转换
            settings = type(settings).model_validate(
                {**settings.model_dump(), **overrides}
            )
        self.settings = settings
        self.store = store or MemoryStore()

        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(self.settings.LARK_TIMEOUT),
            follow_redirects=False,
        )

        logger.info(
            "Initializing Lark client with app_id=%s, base_url=%s",
            _mask_app_id(self.settings.LARK_APP_ID),
            self.settings.LARK_OPEN_BASE_URL,
        )

        self.token_manager = TokenManager(self)

        self.auth = AuthAPI(self)
        self.bot = BotAPI(self)
        self.tenant = TenantAPI(self)
        self.event = EventAPI(self)
        self.passport = PassportAPI(self)
        self.jssdk = JssdkAPI(self)
        self.file = FileAPI(self)
        self.message = MessageAPI(self)
        self.chat = ChatAPI(self)
        self.contact = ContactAPI(self)
        self.bitable = BitableAPI(self)
        self.helpdesk = HelpdeskAPI(self)
        self.applink = AppLinkAPI()

    @property
    def open_base_url(self) -> str:
        return self.settings.LARK_OPEN_BASE_URL.rstrip("/")

    async def __aenter__(self) -> "Lark":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """关闭客户端连接（外部传入的 http_client 由调用方负责关闭）"""
        if self._owns_http:
            logger.info("Closing Lark client connection")
            await self._http.aclose()

    async def request(
        self,
        endpoint: Endpoint,
        request: Any = None,
        *,
        user_access_token: Optional[str] = None,
    ) -> Any:
        """
        按 Endpoint 描述构造请求并分发，结果按 endpoint.response 做类型校验

        返回的 LarkResponse 上可以通过 response_meta / request_id 取到本次响应的元信息。
        """
        req = endpoint.build(request, self.open_base_url)
        data, meta = await self._dispatch(req, user_access_token)
        if endpoint.response is None:
            return data
        result = endpoint.response.model_validate(data if data is not None else {})
        if isinstance(result, LarkResponse):
            result._response_meta = meta
        return result

    async def raw_request(
        self, req: RawRequestReq, *, user_access_token: Optional[str] = None
    ) -> Any:
        """
        通用请求分发

        1. 根据能力标记选择鉴权头（user > tenant > app，helpdesk 头额外附加），见 LarkAuth
        2. is_file 时以 multipart 发送，否则以 JSON 发送
        3. 不跟随重定向，不按 HTTP 状态码判定成功与否
        4. 解析 {code, msg, data}：code != 0 抛出 LarkError，否则返回 data

        Raises:
            LarkError: 开放平台返回 code != 0
            httpx.HTTPError: 网络层错误，原样抛出
        """
        data, _ = await self._dispatch(req, user_access_token)
        return data

    async def _dispatch(
        self, req: RawRequestReq, user_access_token: Optional[str]
    ) -> Tuple[Any, ResponseMeta]:
        logger.info("[lark] %s#%s call api: %s %s", req.scope, req.api, req.method, req.url)
        if req.body and not req.is_file:
            logger.debug("[lark] %s#%s request body: %s", req.scope, req.api, req.body)

        response = await self._send(req, LarkAuth(self, req, user_access_token))
        meta = ResponseMeta.from_response(response)

        if req.is_file_download:
            logger.info(
                "[lark] %s#%s request_id=%s status=%d downloaded %d bytes",
                req.scope,
                req.api,
                meta.request_id,
                meta.status_code,
                meta.content_length,
            )
            return {"file": response.content}, meta

        payload = response.json()
        logger.info(
            "[lark] %s#%s request_id=%s status=%d code=%s",
            req.scope,
            req.api,
            meta.request_id,
            meta.status_code,
            payload.get("code") if isinstance(payload, dict) else None,
        )
        return self._unwrap(req, payload, meta), meta

    def _get_retry_decorator(self):
        """获取重试装饰器配置，LARK_MAX_RETRIES=0 时只请求一次"""
        return retry(
            stop=stop_after_attempt(self.settings.LARK_MAX_RETRIES + 1),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            retry=retry_if_exception_type(RETRYABLE_EXCEPTIONS),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )

    async def _send(self, req: RawRequestReq, auth: httpx.Auth) -> httpx.Response:
        kwargs: Dict[str, Any] = {"auth": auth}
        if req.body:
            if req.is_file:
                kwargs["data"], kwargs["files"] = encode_multipart(req.body)
            else:
                kwargs["json"] = req.body

        @self._get_retry_decorator()
        async def _do_request():
            return await self._http.request(req.method, req.url, **kwargs)

        return await _do_request()

    @staticmethod
    def _unwrap(req: RawRequestReq, payload: Any, meta: ResponseMeta) -> Any:
        if not isinstance(payload, dict):
            return payload

        code = payload.get("code")
        if code:
            msg = payload.get("msg") or ""
            error = payload.get("error")
            violations = (
                error.get("field_violations") if isinstance(error, dict) else None
            )
            for violation in violations or []:
                if not isinstance(violation, dict):
                    continue
                field = violation.get("field", "")
                description = violation.get("description", "")
                msg += f", {field} {description}"
            logger.error(
                "[lark] %s#%s failed: request_id=%s code=%s msg=%s",
                req.scope,
                req.api,
                meta.request_id,
                code,
                msg,
            )
            raise LarkError(req.scope, req.api, code, msg, response=meta)

        # 该接口的数据不在 data 中，而在 bot 字段
        if req.api == "GetBotInfo":
            return payload.get("bot")
        if "data" in payload:
            return payload["data"]
        return payload
