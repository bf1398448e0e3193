"""
凭证 / 企业 / 事件 / 登录态 / JSSDK / 通讯录接口测试
"""

import json

import pytest

from lark_sdk.schemas.platform import (
    BatchGetUserByIDReq,
    GetDepartmentReq,
    GetPassportSessionReq,
    GetUserReq,
)
from tests.conftest import APP_TOKEN_URL, BASE_URL

CONTACT = f"{BASE_URL}/open-apis/contact/v3"


@pytest.mark.asyncio
async def test_auth_api_bypasses_store(lark, store, mock_tenant_token):
    """AuthAPI 每次都直接请求，缓存由 TokenManager 负责"""
    first = await lark.auth.get_tenant_access_token()
    second = await lark.auth.get_tenant_access_token()

    assert first.token == second.token == "t-tenant-token"
    assert first.expire == 7200
    assert mock_tenant_token.call_count == 2
    assert await store.get("lark:tenant_access_token:cli_test:") == ("", 0)


@pytest.mark.asyncio
async def test_get_tenant(lark, respx_mock, mock_tenant_token):
    respx_mock.get(f"{BASE_URL}/open-apis/tenant/v2/tenant/query").respond(
        200,
        json={
            "code": 0,
            "data": {
                "tenant": {
                    "name": "Acme",
                    "tenant_key": "736588c9260f175d",
                    "avatar": {"avatar_72": "https://x/72.png"},
                }
            },
        },
    )

    resp = await lark.tenant.get_tenant()

    assert resp.tenant.name == "Acme"
    assert resp.tenant.avatar.avatar_72 == "https://x/72.png"


@pytest.mark.asyncio
async def test_get_event_outbound_ip_list(lark, respx_mock, mock_tenant_token):
    route = respx_mock.get(f"{BASE_URL}/open-apis/event/v1/outbound_ip").respond(
        200, json={"code": 0, "data": {"ip_list": ["1.1.1.1", "2.2.2.2"]}}
    )

    resp = await lark.event.get_event_outbound_ip_list()

    assert resp.ip_list == ["1.1.1.1", "2.2.2.2"]
    assert route.calls.last.request.url.query == b""


@pytest.mark.asyncio
async def test_get_passport_session(lark, respx_mock, mock_tenant_token):
    route = respx_mock.post(f"{BASE_URL}/open-apis/passport/v1/sessions/query").respond(
        200,
        json={
            "code": 0,
            "data": {"mask_sessions": [{"user_id": "ou_1", "terminal_type": 2}]},
        },
    )

    resp = await lark.passport.get_passport_session(
        GetPassportSessionReq(user_id_type="open_id", user_ids=["ou_1"])
    )

    assert resp.mask_sessions[0].terminal_type == 2
    assert route.calls.last.request.url.query == b"user_id_type=open_id"
    assert json.loads(route.calls.last.request.content) == {"user_ids": ["ou_1"]}


class TestJssdk:
    TICKET_URL = f"{BASE_URL}/open-apis/jssdk/ticket/get"

    @pytest.mark.asyncio
    async def test_uses_app_token(self, lark, respx_mock):
        respx_mock.post(APP_TOKEN_URL).respond(
            200, json={"code": 0, "app_access_token": "a-token", "expire": 7200}
        )
        route = respx_mock.post(self.TICKET_URL).respond(
            200, json={"code": 0, "data": {"expire_in": 7200, "ticket": "jsapi"}}
        )

        resp = await lark.jssdk.get_jssdk_ticket()

        assert resp.ticket == "jsapi"
        assert route.calls.last.request.headers["Authorization"] == "Bearer a-token"

    @pytest.mark.asyncio
    async def test_prefers_user_token(self, lark, respx_mock):
        route = respx_mock.post(self.TICKET_URL).respond(
            200, json={"code": 0, "data": {"expire_in": 7200, "ticket": "jsapi"}}
        )

        await lark.jssdk.get_jssdk_ticket(user_access_token="u-token")

        assert route.calls.last.request.headers["Authorization"] == "Bearer u-token"


class TestContact:
    @pytest.mark.asyncio
    async def test_get_user(self, lark, respx_mock, mock_tenant_token):
        route = respx_mock.get(f"{CONTACT}/users/ou_1").respond(
            200,
            json={
                "code": 0,
                "data": {"user": {"open_id": "ou_1", "name": "张三", "department_ids": ["od_1"]}},
            },
        )

        resp = await lark.contact.get_user(GetUserReq(user_id="ou_1", user_id_type="open_id"))

        assert resp.user.name == "张三"
        assert resp.user.department_ids == ["od_1"]
        assert route.calls.last.request.url.query == b"user_id_type=open_id"

    @pytest.mark.asyncio
    async def test_batch_get_user_by_id(self, lark, respx_mock, mock_tenant_token):
        route = respx_mock.post(f"{CONTACT}/users/batch_get_id").respond(
            200,
            json={
                "code": 0,
                "data": {"user_list": [{"user_id": "ou_1", "email": "a@example.com"}]},
            },
        )

        resp = await lark.contact.batch_get_user_by_id(
            BatchGetUserByIDReq(user_id_type="open_id", emails=["a@example.com"])
        )

        assert resp.user_list[0].user_id == "ou_1"
        assert json.loads(route.calls.last.request.content) == {"emails": ["a@example.com"]}

    @pytest.mark.asyncio
    async def test_get_department(self, lark, respx_mock, mock_tenant_token):
        respx_mock.get(f"{CONTACT}/departments/od_1").respond(
            200,
            json={"code": 0, "data": {"department": {"name": "研发", "member_count": 12}}},
        )

        resp = await lark.contact.get_department(GetDepartmentReq(department_id="od_1"))

        assert resp.department.member_count == 12
