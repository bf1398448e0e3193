from typing import Optional

from pydantic import BaseModel, PrivateAttr

from lark_sdk.core.request import ResponseMeta


class LarkRequest(BaseModel):
    """请求模型：字段名即 path/query/body 参数名，未声明的字段直接报错"""

    model_config = {"extra": "forbid"}


class LarkResponse(BaseModel):
    """响应模型：开放平台会陆续增加字段，未声明的字段保留"""

    model_config = {"extra": "allow"}

    _response_meta: Optional[ResponseMeta] = PrivateAttr(default=None)

    @property
    def response_meta(self) -> Optional[ResponseMeta]:
        """本次响应的元信息，由 Lark.request 填充"""
        return self._response_meta

    @property
    def request_id(self) -> Optional[str]:
        """反馈问题时提供给开放平台的 request id"""
        return self._response_meta.request_id if self._response_meta else None


class EmptyRequest(LarkRequest):
    pass


class EmptyResponse(LarkResponse):
    pass


class DownloadResponse(LarkResponse):
    file: bytes


class PageResponse(LarkResponse):
    has_more: bool = False
    page_token: str | None = None
