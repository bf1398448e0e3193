from lark_sdk.api.base import BaseAPI
from lark_sdk.core.request import Endpoint
from lark_sdk.schemas.platform import GetPassportSessionReq, GetPassportSessionResp

GET_PASSPORT_SESSION = Endpoint(
    scope="Passport",
    api="GetPassportSession",
    method="POST",
    path="/open-apis/passport/v1/sessions/query",
    query=("user_id_type",),
    body=("user_ids",),
    response=GetPassportSessionResp,
    need_tenant_access_token=True,
)


class PassportAPI(BaseAPI):
    async def get_passport_session(
        self, request: GetPassportSessionReq
    ) -> GetPassportSessionResp:
        """查询用户的登录信息"""
        return await self._call(GET_PASSPORT_SESSION, request)
