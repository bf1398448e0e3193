from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from lark_sdk.core.request import ResponseMeta


class LarkError(Exception):
    """开放平台返回 code != 0 时抛出"""

    def __init__(
        self,
        scope: str,
        api: str,
        code: int,
        msg: str,
        response: Optional["ResponseMeta"] = None,
    ):
        self.scope = scope
        self.api = api
        self.code = code
        self.msg = msg
        self.response = response
        super().__init__(f"{scope}#{api} {code}: {msg}")

    @property
    def request_id(self) -> Optional[str]:
        return self.response.request_id if self.response else None
