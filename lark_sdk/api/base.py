from typing import TYPE_CHECKING, Any, Optional

from lark_sdk.core.request import Endpoint

if TYPE_CHECKING:
    from lark_sdk.core.client import Lark


class BaseAPI:
    """
    接口模块基类

    子类只声明 Endpoint 并把请求模型交给 Lark.request，
    鉴权、编码、信封解析统一由 Lark.raw_request 完成。
    """

    def __init__(self, lark: "Lark"):
        self._lark = lark

    async def _call(
        self,
        endpoint: Endpoint,
        request: Any = None,
        user_access_token: Optional[str] = None,
    ) -> Any:
        return await self._lark.request(
            endpoint, request, user_access_token=user_access_token
        )
