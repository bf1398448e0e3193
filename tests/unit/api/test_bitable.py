import json

import pytest

from lark_sdk import LarkError
from lark_sdk.schemas.bitable import (
    BatchCreateBitableRecordReq,
    BitableRecordInput,
    CreateBitableRecordReq,
    DeleteBitableRecordReq,
    GetBitableFieldListReq,
    GetBitableRecordListReq,
    GetBitableRecordReq,
    GetBitableTableListReq,
    GetBitableViewListReq,
    UpdateBitableRecordReq,
)
from tests.conftest import BASE_URL

TABLES = f"{BASE_URL}/open-apis/bitable/v1/apps/app1/tables"
RECORDS = f"{TABLES}/tbl1/records"


@pytest.mark.asyncio
async def test_get_record_list(lark, respx_mock, mock_tenant_token):
    """未传入的 query 参数不出现，其余按声明顺序"""
    route = respx_mock.get(RECORDS).respond(
        200,
        json={
            "code": 0,
            "data": {
                "has_more": False,
                "total": 1,
                "items": [{"record_id": "rec1", "fields": {"标题": "hello"}}],
            },
        },
    )

    resp = await lark.bitable.get_bitable_record_list(
        GetBitableRecordListReq(app_token="app1", table_id="tbl1", page_size=10)
    )

    assert resp.total == 1
    assert resp.items[0].fields == {"标题": "hello"}
    assert route.calls.last.request.url.path == (
        "/open-apis/bitable/v1/apps/app1/tables/tbl1/records"
    )
    assert route.calls.last.request.url.query == b"page_size=10"


@pytest.mark.asyncio
async def test_get_record_list_with_user_token(lark, respx_mock):
    route = respx_mock.get(RECORDS).respond(200, json={"code": 0, "data": {"items": []}})

    await lark.bitable.get_bitable_record_list(
        GetBitableRecordListReq(
            app_token="app1",
            table_id="tbl1",
            view_id="vew1",
            automatic_fields=True,
            page_token="p2",
        ),
        user_access_token="u-token",
    )

    request = route.calls.last.request
    assert request.headers["Authorization"] == "Bearer u-token"
    assert request.url.query == b"view_id=vew1&automatic_fields=true&page_token=p2"


@pytest.mark.asyncio
async def test_get_record_list_error(lark, respx_mock, mock_tenant_token):
    respx_mock.get(RECORDS).respond(
        200, json={"code": 1254040, "msg": "BaseTokenNotFound"}
    )

    with pytest.raises(LarkError) as exc_info:
        await lark.bitable.get_bitable_record_list(
            GetBitableRecordListReq(app_token="app1", table_id="tbl1")
        )

    assert str(exc_info.value) == "Bitable#GetBitableRecordList 1254040: BaseTokenNotFound"


@pytest.mark.asyncio
async def test_list_tables_fields_views(lark, respx_mock, mock_tenant_token):
    respx_mock.get(TABLES).respond(
        200, json={"code": 0, "data": {"items": [{"table_id": "tbl1", "name": "任务"}]}}
    )
    respx_mock.get(f"{TABLES}/tbl1/fields").respond(
        200,
        json={"code": 0, "data": {"items": [{"field_id": "fld1", "field_name": "标题", "type": 1}]}},
    )
    respx_mock.get(f"{TABLES}/tbl1/views").respond(
        200,
        json={"code": 0, "data": {"items": [{"view_id": "vew1", "view_type": "grid"}]}},
    )

    tables = await lark.bitable.get_bitable_table_list(GetBitableTableListReq(app_token="app1"))
    fields = await lark.bitable.get_bitable_field_list(
        GetBitableFieldListReq(app_token="app1", table_id="tbl1")
    )
    views = await lark.bitable.get_bitable_view_list(
        GetBitableViewListReq(app_token="app1", table_id="tbl1")
    )

    assert tables.items[0].name == "任务"
    assert fields.items[0].type == 1
    assert views.items[0].view_type == "grid"
    # token 只获取一次
    assert mock_tenant_token.call_count == 1


@pytest.mark.asyncio
async def test_record_crud(lark, respx_mock, mock_tenant_token):
    record = {"record_id": "rec1", "fields": {"标题": "hello"}}
    create = respx_mock.post(RECORDS).respond(200, json={"code": 0, "data": {"record": record}})
    get = respx_mock.get(f"{RECORDS}/rec1").respond(
        200, json={"code": 0, "data": {"record": record}}
    )
    update = respx_mock.put(f"{RECORDS}/rec1").respond(
        200, json={"code": 0, "data": {"record": record}}
    )
    delete = respx_mock.delete(f"{RECORDS}/rec1").respond(
        200, json={"code": 0, "data": {"deleted": True, "record_id": "rec1"}}
    )

    created = await lark.bitable.create_bitable_record(
        CreateBitableRecordReq(app_token="app1", table_id="tbl1", fields={"标题": "hello"})
    )
    fetched = await lark.bitable.get_bitable_record(
        GetBitableRecordReq(app_token="app1", table_id="tbl1", record_id="rec1")
    )
    await lark.bitable.update_bitable_record(
        UpdateBitableRecordReq(
            app_token="app1", table_id="tbl1", record_id="rec1", fields={"标题": "bye"}
        )
    )
    deleted = await lark.bitable.delete_bitable_record(
        DeleteBitableRecordReq(app_token="app1", table_id="tbl1", record_id="rec1")
    )

    assert created.record.record_id == "rec1"
    assert fetched.record.fields == {"标题": "hello"}
    assert json.loads(create.calls.last.request.content) == {"fields": {"标题": "hello"}}
    assert json.loads(update.calls.last.request.content) == {"fields": {"标题": "bye"}}
    assert get.called
    assert delete.calls.last.request.content == b""
    assert deleted.deleted is True


@pytest.mark.asyncio
async def test_batch_create_records(lark, respx_mock, mock_tenant_token):
    route = respx_mock.post(f"{RECORDS}/batch_create").respond(
        200,
        json={"code": 0, "data": {"records": [{"record_id": "rec1"}, {"record_id": "rec2"}]}},
    )

    resp = await lark.bitable.batch_create_bitable_record(
        BatchCreateBitableRecordReq(
            app_token="app1",
            table_id="tbl1",
            records=[
                BitableRecordInput(fields={"标题": "a"}),
                BitableRecordInput(fields={"标题": "b"}),
            ],
        )
    )

    assert [r.record_id for r in resp.records] == ["rec1", "rec2"]
    assert json.loads(route.calls.last.request.content) == {
        "records": [{"fields": {"标题": "a"}}, {"fields": {"标题": "b"}}]
    }
