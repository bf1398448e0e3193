from typing import Any, Dict, List, Optional

from pydantic import Field

from lark_sdk.schemas.base import LarkRequest, LarkResponse, PageResponse


class BitableTable(LarkResponse):
    table_id: str = ""
    revision: int = 0
    name: str = ""


class GetBitableTableListReq(LarkRequest):
    app_token: str
    page_token: Optional[str] = None
    page_size: Optional[int] = None


class GetBitableTableListResp(PageResponse):
    total: int = 0
    items: List[BitableTable] = Field(default_factory=list)


class BitableField(LarkResponse):
    field_id: str = ""
    field_name: str = ""
    type: int = 0  # 1 多行文本, 2 数字, 3 单选, 4 多选, 5 日期, ...
    property: Optional[Dict[str, Any]] = None


class GetBitableFieldListReq(LarkRequest):
    app_token: str
    table_id: str
    view_id: Optional[str] = None
    page_token: Optional[str] = None
    page_size: Optional[int] = None


class GetBitableFieldListResp(PageResponse):
    total: int = 0
    items: List[BitableField] = Field(default_factory=list)


class BitableView(LarkResponse):
    view_id: str = ""
    view_name: str = ""
    view_type: str = ""  # grid / kanban / gallery / gantt / form


class GetBitableViewListReq(LarkRequest):
    app_token: str
    table_id: str
    page_size: Optional[int] = None
    page_token: Optional[str] = None


class GetBitableViewListResp(PageResponse):
    total: int = 0
    items: List[BitableView] = Field(default_factory=list)


class BitableRecord(LarkResponse):
    record_id: str = ""
    fields: Dict[str, Any] = Field(default_factory=dict)


class GetBitableRecordListReq(LarkRequest):
    app_token: str
    table_id: str
    view_id: Optional[str] = None
    filter: Optional[str] = None
    sort: Optional[str] = None
    field_names: Optional[str] = None
    text_field_as_array: Optional[bool] = None
    user_id_type: Optional[str] = None
    display_formula_ref: Optional[bool] = None
    automatic_fields: Optional[bool] = None
    page_token: Optional[str] = None
    page_size: Optional[int] = None


class GetBitableRecordListResp(PageResponse):
    total: int = 0
    items: List[BitableRecord] = Field(default_factory=list)


class GetBitableRecordReq(LarkRequest):
    app_token: str
    table_id: str
    record_id: str
    text_field_as_array: Optional[bool] = None
    user_id_type: Optional[str] = None
    display_formula_ref: Optional[bool] = None
    automatic_fields: Optional[bool] = None


class BitableRecordResp(LarkResponse):
    record: BitableRecord


class CreateBitableRecordReq(LarkRequest):
    app_token: str
    table_id: str
    user_id_type: Optional[str] = None
    fields: Dict[str, Any]


class BitableRecordInput(LarkRequest):
    fields: Dict[str, Any]


class BatchCreateBitableRecordReq(LarkRequest):
    app_token: str
    table_id: str
    user_id_type: Optional[str] = None
    records: List[BitableRecordInput]


class BatchCreateBitableRecordResp(LarkResponse):
    records: List[BitableRecord] = Field(default_factory=list)


class UpdateBitableRecordReq(LarkRequest):
    app_token: str
    table_id: str
    record_id: str
    user_id_type: Optional[str] = None
    fields: Dict[str, Any]


class DeleteBitableRecordReq(LarkRequest):
    app_token: str
    table_id: str
    record_id: str


class DeleteBitableRecordResp(LarkResponse):
    deleted: bool = False
    record_id: str = ""
