import pytest
from pydantic import ValidationError

from lark_sdk.api.applink import AppLinkAPI
from lark_sdk.schemas.applink import OpenBotReq, OpenMiniProgramReq

BASE = "https://applink.feishu.cn/client"


@pytest.fixture
def applink():
    return AppLinkAPI()


def test_open_bot(applink):
    assert applink.open_bot(OpenBotReq(appId="cli_x")) == f"{BASE}/bot/open?appId=cli_x"


def test_empty_request_has_no_query(applink):
    assert applink.open_calender({}) == f"{BASE}/calendar/open"
    assert applink.open_lark() == f"{BASE}/op/open"
    assert applink.open_scan() == f"{BASE}/qrcode/main"
    assert applink.open_task_create() == f"{BASE}/todo/create"


def test_calendar(applink):
    assert (
        applink.open_calender_event_create({"startTime": "1581950880", "endTime": "1581951000"})
        == f"{BASE}/calendar/event/create?endTime=1581951000&startTime=1581950880"
    )
    assert (
        applink.open_calender_event_create({"summary": "主题"})
        == f"{BASE}/calendar/event/create?summary=%E4%B8%BB%E9%A2%98"
    )
    assert (
        applink.open_calender_view({"type": "day", "date": "1581999948"})
        == f"{BASE}/calendar/view?date=1581999948&type=day"
    )
    assert applink.open_calender_account() == f"{BASE}/calendar/account"


def test_open_docs(applink):
    assert applink.open_docs(
        {"URL": "https://bytedance.feishu.cn/docs/doccn9EOHrnB0r0iEN9HoCPczbf"}
    ) == (
        f"{BASE}/docs/open"
        "?URL=https%3A%2F%2Fbytedance.feishu.cn%2Fdocs%2Fdoccn9EOHrnB0r0iEN9HoCPczbf"
    )


def test_open_mini_program(applink):
    url = applink.open_mini_program(
        OpenMiniProgramReq(
            appId="1234567890",
            mode="window",
            path="pages/home?xid=123",
            path_pc="pages/pc_home?pid=123",
        )
    )
    assert url == (
        f"{BASE}/mini_program/open?appId=1234567890&mode=window"
        "&path=pages%2Fhome%3Fxid%3D123&path_pc=pages%2Fpc_home%3Fpid%3D123"
    )


def test_open_sso_login_and_web_url(applink):
    assert (
        applink.open_sso_login({"sso_domain": "sso.domain.com", "tenant_name": "tenant-id"})
        == f"{BASE}/passport/sso_login?sso_domain=sso.domain.com&tenant_name=tenant-id"
    )
    assert (
        applink.open_web_url({"url": "google.com", "mode": "window"})
        == f"{BASE}/web_url/open?mode=window&url=google.com"
    )


def test_chat_and_tasks(applink):
    assert applink.open_chat({"openChatId": "oc_1"}) == f"{BASE}/chat/open?openChatId=oc_1"
    assert applink.open_web_app({"appId": "cli_h5"}) == f"{BASE}/web_app/open?appId=cli_h5"
    assert applink.open_task() == f"{BASE}/todo/open"
    assert (
        applink.open_task_detail({"guid": "g1", "mode": "app"})
        == f"{BASE}/todo/detail?guid=g1&mode=app"
    )
    assert applink.open_task_tab({"tab": "all"}) == f"{BASE}/todo/view?tab=all"


def test_unknown_field_rejected(applink):
    with pytest.raises(ValidationError):
        applink.open_bot({"appId": "cli_x", "app_id": "cli_x"})


@pytest.mark.asyncio
async def test_available_on_client(lark):
    assert lark.applink.open_bot({"appId": "cli_x"}) == f"{BASE}/bot/open?appId=cli_x"
