"""
请求描述层

- Endpoint: 单个开放平台接口的静态描述（方法、路径模板、query/body 字段、能力标记）
- RawRequestReq: 一次请求的瞬时描述，交给 Lark.raw_request 分发
- ResponseMeta: 一次响应的元信息（request_id、状态码等），用于日志和错误定位

所有接口模块只声明 Endpoint 表，不再为每个接口手写 getPath/getBody。
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, Type
from urllib.parse import quote

import httpx
from pydantic import BaseModel

# encodeURIComponent 不转义的字符
_URI_COMPONENT_SAFE = "-_.!~*'()"
_PLACEHOLDER = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return quote(str(value), safe=_URI_COMPONENT_SAFE)


def encode_query(query: Mapping[str, Any], sort: bool = False) -> str:
    """
    构造 query string

    - 值为 None 的 key 不出现
    - 默认保持 key 的插入顺序，sort=True 时按编码后的 k=v 排序
    - list/tuple 值展开为重复的 key
    """
    pairs = []
    for key, value in query.items():
        if value is None:
            continue
        values = value if isinstance(value, (list, tuple)) else [value]
        for item in values:
            pairs.append(f"{quote(str(key), safe=_URI_COMPONENT_SAFE)}={_encode_value(item)}")
    if sort:
        pairs.sort()
    return "&".join(pairs)


def resolve_path(template: str, values: Mapping[str, Any]) -> str:
    """将 /apps/:app_token/tables/:table_id 中的占位符替换为实际值"""

    def _replace(match: "re.Match[str]") -> str:
        name = match.group(1)
        value = values.get(name)
        if value is None:
            raise ValueError(f"missing path parameter '{name}' for {template}")
        return quote(str(value), safe="")

    return _PLACEHOLDER.sub(_replace, template)


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(exclude_none=True, by_alias=True)
    if isinstance(value, list):
        return [_dump(v) for v in value]
    if isinstance(value, dict):
        return {k: _dump(v) for k, v in value.items()}
    return value


def build_body(values: Mapping[str, Any], fields: Tuple[str, ...]) -> Dict[str, Any]:
    """按白名单取出 body 字段，丢弃 None；bytes 与文件对象原样保留"""
    body: Dict[str, Any] = {}
    for name in fields:
        value = values.get(name)
        if value is None:
            continue
        body[name] = _dump(value)
    return body


def _field_values(request: Any) -> Dict[str, Any]:
    if request is None:
        return {}
    if isinstance(request, BaseModel):
        # dict(model) 保留原始值（bytes、嵌套 model 不会被序列化）
        return dict(request)
    if isinstance(request, Mapping):
        return dict(request)
    raise TypeError(f"unsupported request type: {type(request).__name__}")


@dataclass
class RawRequestReq:
    scope: str  # 接口所属领域，如 Auth、Chat、Bitable
    api: str  # 接口名，如 GetBitableRecordList
    method: str
    url: str
    body: Optional[Dict[str, Any]] = None
    is_file: bool = False
    is_file_download: bool = False
    need_tenant_access_token: bool = False
    need_app_access_token: bool = False
    need_user_access_token: bool = False
    need_helpdesk_auth: bool = False


@dataclass(frozen=True)
class Endpoint:
    scope: str
    api: str
    method: str
    path: str
    query: Tuple[str, ...] = ()
    body: Tuple[str, ...] = ()
    response: Optional[Type[BaseModel]] = None
    need_tenant_access_token: bool = False
    need_app_access_token: bool = False
    need_user_access_token: bool = False
    need_helpdesk_auth: bool = False
    is_file: bool = False
    is_file_download: bool = False

    def build(self, request: Any, base_url: str) -> RawRequestReq:
        values = _field_values(request)

        url = base_url.rstrip("/") + resolve_path(self.path, values)
        query = encode_query({name: values.get(name) for name in self.query})
        if query:
            url = f"{url}?{query}"

        body = build_body(values, self.body) if self.body else None

        return RawRequestReq(
            scope=self.scope,
            api=self.api,
            method=self.method,
            url=url,
            body=body,
            is_file=self.is_file,
            is_file_download=self.is_file_download,
            need_tenant_access_token=self.need_tenant_access_token,
            need_app_access_token=self.need_app_access_token,
            need_user_access_token=self.need_user_access_token,
            need_helpdesk_auth=self.need_helpdesk_auth,
        )


@dataclass
class ResponseMeta:
    method: str
    url: str
    request_id: str
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    content_length: int = 0

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ResponseMeta":
        headers = dict(response.headers)
        request_id = response.headers.get("X-Tt-Logid") or response.headers.get(
            "X-Request-Id", ""
        )
        return cls(
            method=response.request.method,
            url=str(response.request.url),
            request_id=request_id,
            status_code=response.status_code,
            headers=headers,
            content_length=len(response.content),
        )
