import base64
import json

import pytest
import pytest_asyncio

from lark_sdk.core.auth import HELPDESK_AUTH_HEADER
from lark_sdk.schemas.helpdesk import (
    DownloadHelpdeskTicketImageReq,
    GetHelpdeskTicketListReq,
    GetHelpdeskTicketMessageListReq,
    GetHelpdeskTicketReq,
    SendHelpdeskTicketMessageReq,
    StartHelpdeskServiceReq,
)
from tests.conftest import BASE_URL, make_lark

HELPDESK = f"{BASE_URL}/open-apis/helpdesk/v1"
HELPDESK_AUTH = base64.b64encode(b"hd_1:hd_secret").decode()


@pytest_asyncio.fixture
async def helpdesk_lark():
    lark = make_lark(helpdesk_id="hd_1", helpdesk_token="hd_secret")
    yield lark
    await lark.aclose()


@pytest.mark.asyncio
async def test_start_service(helpdesk_lark, respx_mock, mock_tenant_token):
    route = respx_mock.post(f"{HELPDESK}/start_service").respond(
        200, json={"code": 0, "data": {"chat_id": "oc_hd"}}
    )

    resp = await helpdesk_lark.helpdesk.start_helpdesk_service(
        StartHelpdeskServiceReq(open_id="ou_1", human_service=True)
    )

    request = route.calls.last.request
    assert resp.chat_id == "oc_hd"
    assert request.headers[HELPDESK_AUTH_HEADER] == HELPDESK_AUTH
    assert request.headers["Authorization"] == "Bearer t-tenant-token"
    assert json.loads(request.content) == {"human_service": True, "open_id": "ou_1"}


@pytest.mark.asyncio
async def test_get_ticket(helpdesk_lark, respx_mock, mock_tenant_token):
    respx_mock.get(f"{HELPDESK}/tickets/6626871355780366331").respond(
        200,
        json={
            "code": 0,
            "data": {"ticket": {"ticket_id": "6626871355780366331", "status": 50}},
        },
    )

    resp = await helpdesk_lark.helpdesk.get_helpdesk_ticket(
        GetHelpdeskTicketReq(ticket_id="6626871355780366331")
    )

    assert resp.ticket.status == 50


@pytest.mark.asyncio
async def test_get_ticket_list(helpdesk_lark, respx_mock, mock_tenant_token):
    route = respx_mock.get(f"{HELPDESK}/tickets").respond(
        200, json={"code": 0, "data": {"total": 1, "tickets": [{"ticket_id": "t1"}]}}
    )

    resp = await helpdesk_lark.helpdesk.get_helpdesk_ticket_list(
        GetHelpdeskTicketListReq(status_list=[1, 2], page=1, page_size=20)
    )

    assert resp.total == 1
    assert route.calls.last.request.url.query == (
        b"status_list=1&status_list=2&page=1&page_size=20"
    )


@pytest.mark.asyncio
async def test_ticket_messages(helpdesk_lark, respx_mock, mock_tenant_token):
    list_route = respx_mock.get(f"{HELPDESK}/tickets/t1/messages").respond(
        200,
        json={"code": 0, "data": {"total": 1, "messages": [{"id": "m1", "content": "hi"}]}},
    )
    send_route = respx_mock.post(f"{HELPDESK}/tickets/t1/messages").respond(
        200, json={"code": 0, "data": {"message_id": "m2"}}
    )

    messages = await helpdesk_lark.helpdesk.get_helpdesk_ticket_message_list(
        GetHelpdeskTicketMessageListReq(ticket_id="t1", page_size=5)
    )
    sent = await helpdesk_lark.helpdesk.send_helpdesk_ticket_message(
        SendHelpdeskTicketMessageReq(
            ticket_id="t1", msg_type="post", content={"post": {"zh_cn": {"title": "hi"}}}
        )
    )

    assert messages.messages[0].content == "hi"
    assert list_route.calls.last.request.url.query == b"page_size=5"
    assert sent.message_id == "m2"
    assert json.loads(send_route.calls.last.request.content) == {
        "msg_type": "post",
        "content": {"post": {"zh_cn": {"title": "hi"}}},
    }


@pytest.mark.asyncio
async def test_download_ticket_image(helpdesk_lark, respx_mock, mock_tenant_token):
    route = respx_mock.get(f"{HELPDESK}/ticket_images").respond(200, content=b"\xff\xd8jpeg")

    resp = await helpdesk_lark.helpdesk.download_helpdesk_ticket_image(
        DownloadHelpdeskTicketImageReq(ticket_id="t1", msg_id="m1", index=0)
    )

    assert resp.file == b"\xff\xd8jpeg"
    assert route.calls.last.request.url.query == b"ticket_id=t1&msg_id=m1&index=0"
