from lark_sdk.api.base import BaseAPI
from lark_sdk.core.request import Endpoint
from lark_sdk.schemas.platform import GetTenantResp

GET_TENANT = Endpoint(
    scope="Tenant",
    api="GetTenant",
    method="GET",
    path="/open-apis/tenant/v2/tenant/query",
    response=GetTenantResp,
    need_tenant_access_token=True,
)


class TenantAPI(BaseAPI):
    async def get_tenant(self) -> GetTenantResp:
        """获取企业名称、企业编号等企业信息"""
        return await self._call(GET_TENANT)
