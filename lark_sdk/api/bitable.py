"""
BitableAPI - 多维表格

路径均挂在 /open-apis/bitable/v1/apps/:app_token 下，
支持 tenant_access_token，传入 user_access_token 时以用户身份访问。
"""

from typing import Optional

from lark_sdk.api.base import BaseAPI
from lark_sdk.core.request import Endpoint
from lark_sdk.schemas.bitable import (
    BatchCreateBitableRecordReq,
    BatchCreateBitableRecordResp,
    BitableRecordResp,
    CreateBitableRecordReq,
    DeleteBitableRecordReq,
    DeleteBitableRecordResp,
    GetBitableFieldListReq,
    GetBitableFieldListResp,
    GetBitableRecordListReq,
    GetBitableRecordListResp,
    GetBitableRecordReq,
    GetBitableTableListReq,
    GetBitableTableListResp,
    GetBitableViewListReq,
    GetBitableViewListResp,
    UpdateBitableRecordReq,
)

_TABLES = "/open-apis/bitable/v1/apps/:app_token/tables"
_RECORDS = _TABLES + "/:table_id/records"


def _endpoint(api: str, method: str, path: str, **kwargs) -> Endpoint:
    return Endpoint(
        scope="Bitable",
        api=api,
        method=method,
        path=path,
        need_tenant_access_token=True,
        need_user_access_token=True,
        **kwargs,
    )


GET_BITABLE_TABLE_LIST = _endpoint(
    "GetBitableTableList",
    "GET",
    _TABLES,
    query=("page_token", "page_size"),
    response=GetBitableTableListResp,
)
GET_BITABLE_FIELD_LIST = _endpoint(
    "GetBitableFieldList",
    "GET",
    _TABLES + "/:table_id/fields",
    query=("view_id", "page_token", "page_size"),
    response=GetBitableFieldListResp,
)
GET_BITABLE_VIEW_LIST = _endpoint(
    "GetBitableViewList",
    "GET",
    _TABLES + "/:table_id/views",
    query=("page_size", "page_token"),
    response=GetBitableViewListResp,
)
GET_BITABLE_RECORD_LIST = _endpoint(
    "GetBitableRecordList",
    "GET",
    _RECORDS,
    query=(
        "view_id",
        "filter",
        "sort",
        "field_names",
        "text_field_as_array",
        "user_id_type",
        "display_formula_ref",
        "automatic_fields",
        "page_token",
        "page_size",
    ),
    response=GetBitableRecordListResp,
)
GET_BITABLE_RECORD = _endpoint(
    "GetBitableRecord",
    "GET",
    _RECORDS + "/:record_id",
    query=(
        "text_field_as_array",
        "user_id_type",
        "display_formula_ref",
        "automatic_fields",
    ),
    response=BitableRecordResp,
)
CREATE_BITABLE_RECORD = _endpoint(
    "CreateBitableRecord",
    "POST",
    _RECORDS,
    query=("user_id_type",),
    body=("fields",),
    response=BitableRecordResp,
)
BATCH_CREATE_BITABLE_RECORD = _endpoint(
    "BatchCreateBitableRecord",
    "POST",
    _RECORDS + "/batch_create",
    query=("user_id_type",),
    body=("records",),
    response=BatchCreateBitableRecordResp,
)
UPDATE_BITABLE_RECORD = _endpoint(
    "UpdateBitableRecord",
    "PUT",
    _RECORDS + "/:record_id",
    query=("user_id_type",),
    body=("fields",),
    response=BitableRecordResp,
)
DELETE_BITABLE_RECORD = _endpoint(
    "DeleteBitableRecord",
    "DELETE",
    _RECORDS + "/:record_id",
    response=DeleteBitableRecordResp,
)


class BitableAPI(BaseAPI):
    async def get_bitable_table_list(
        self, request: GetBitableTableListReq, user_access_token: Optional[str] = None
    ) -> GetBitableTableListResp:
        return await self._call(GET_BITABLE_TABLE_LIST, request, user_access_token)

    async def get_bitable_field_list(
        self, request: GetBitableFieldListReq, user_access_token: Optional[str] = None
    ) -> GetBitableFieldListResp:
        return await self._call(GET_BITABLE_FIELD_LIST, request, user_access_token)

    async def get_bitable_view_list(
        self, request: GetBitableViewListReq, user_access_token: Optional[str] = None
    ) -> GetBitableViewListResp:
        return await self._call(GET_BITABLE_VIEW_LIST, request, user_access_token)

    async def get_bitable_record_list(
        self, request: GetBitableRecordListReq, user_access_token: Optional[str] = None
    ) -> GetBitableRecordListResp:
        """
        列出记录

        filter / sort 使用多维表格公式语法，例如:
            filter='CurrentValue.[状态] = "进行中"'
        单次最多返回 500 条，通过 page_token 翻页。
        """
        return await self._call(GET_BITABLE_RECORD_LIST, request, user_access_token)

    async def get_bitable_record(
        self, request: GetBitableRecordReq, user_access_token: Optional[str] = None
    ) -> BitableRecordResp:
        return await self._call(GET_BITABLE_RECORD, request, user_access_token)

    async def create_bitable_record(
        self, request: CreateBitableRecordReq, user_access_token: Optional[str] = None
    ) -> BitableRecordResp:
        return await self._call(CREATE_BITABLE_RECORD, request, user_access_token)

    async def batch_create_bitable_record(
        self,
        request: BatchCreateBitableRecordReq,
        user_access_token: Optional[str] = None,
    ) -> BatchCreateBitableRecordResp:
        """单次最多新增 500 条记录"""
        return await self._call(BATCH_CREATE_BITABLE_RECORD, request, user_access_token)

    async def update_bitable_record(
        self, request: UpdateBitableRecordReq, user_access_token: Optional[str] = None
    ) -> BitableRecordResp:
        return await self._call(UPDATE_BITABLE_RECORD, request, user_access_token)

    async def delete_bitable_record(
        self, request: DeleteBitableRecordReq, user_access_token: Optional[str] = None
    ) -> DeleteBitableRecordResp:
        return await self._call(DELETE_BITABLE_RECORD, request, user_access_token)
