from typing import Optional

from lark_sdk.api.base import BaseAPI
from lark_sdk.core.request import Endpoint
from lark_sdk.schemas.platform import (
    BatchGetUserByIDReq,
    BatchGetUserByIDResp,
    GetDepartmentReq,
    GetDepartmentResp,
    GetUserReq,
    GetUserResp,
)

GET_USER = Endpoint(
    scope="Contact",
    api="GetUser",
    method="GET",
    path="/open-apis/contact/v3/users/:user_id",
    query=("user_id_type", "department_id_type"),
    response=GetUserResp,
    need_tenant_access_token=True,
    need_user_access_token=True,
)
BATCH_GET_USER_BY_ID = Endpoint(
    scope="Contact",
    api="BatchGetUserByID",
    method="POST",
    path="/open-apis/contact/v3/users/batch_get_id",
    query=("user_id_type",),
    body=("emails", "mobiles"),
    response=BatchGetUserByIDResp,
    need_tenant_access_token=True,
)
GET_DEPARTMENT = Endpoint(
    scope="Contact",
    api="GetDepartment",
    method="GET",
    path="/open-apis/contact/v3/departments/:department_id",
    query=("user_id_type", "department_id_type"),
    response=GetDepartmentResp,
    need_tenant_access_token=True,
    need_user_access_token=True,
)


class ContactAPI(BaseAPI):
    async def get_user(
        self, request: GetUserReq, user_access_token: Optional[str] = None
    ) -> GetUserResp:
        return await self._call(GET_USER, request, user_access_token)

    async def batch_get_user_by_id(
        self, request: BatchGetUserByIDReq
    ) -> BatchGetUserByIDResp:
        """通过手机号或邮箱获取用户 ID"""
        return await self._call(BATCH_GET_USER_BY_ID, request)

    async def get_department(
        self, request: GetDepartmentReq, user_access_token: Optional[str] = None
    ) -> GetDepartmentResp:
        return await self._call(GET_DEPARTMENT, request, user_access_token)
