"""
AppLinkAPI - 生成飞书客户端 AppLink 链接

纯本地拼接，不发起任何网络请求。参数按 key 排序后以 encodeURIComponent 规则编码，
没有参数时不带 "?"。

Usage:
    lark.applink.open_bot(OpenBotReq(appId="cli_xxx"))
    lark.applink.open_docs({"URL": "https://bytedance.feishu.cn/docs/xxx"})
"""

from typing import Any, Mapping, Type, Union

from lark_sdk.core.request import encode_query
from lark_sdk.schemas.applink import (
    AppLinkReq,
    OpenBotReq,
    OpenCalenderAccountReq,
    OpenCalenderEventCreateReq,
    OpenCalenderReq,
    OpenCalenderViewReq,
    OpenChatReq,
    OpenDocsReq,
    OpenLarkReq,
    OpenMiniProgramReq,
    OpenScanReq,
    OpenSSOLoginReq,
    OpenTaskCreateReq,
    OpenTaskDetailReq,
    OpenTaskReq,
    OpenTaskTabReq,
    OpenWebAppReq,
    OpenWebURLReq,
)

APPLINK_BASE_URL = "https://applink.feishu.cn"

AppLinkInput = Union[AppLinkReq, Mapping[str, Any], None]


def _join(path: str, model: Type[AppLinkReq], request: AppLinkInput) -> str:
    if request is None:
        request = model()
    elif not isinstance(request, AppLinkReq):
        request = model.model_validate(dict(request))
    url = f"{APPLINK_BASE_URL}/{path}"
    query = encode_query(request.model_dump(exclude_none=True), sort=True)
    return f"{url}?{query}" if query else url


class AppLinkAPI:
    """
    AppLink 构造器

    请求既可以是对应的 pydantic 模型，也可以是普通 dict（会按模型校验字段）。
    """

    def open_lark(self, request: AppLinkInput = None) -> str:
        """唤起飞书客户端"""
        return _join("client/op/open", OpenLarkReq, request)

    def open_mini_program(self, request: AppLinkInput) -> str:
        return _join("client/mini_program/open", OpenMiniProgramReq, request)

    def open_web_app(self, request: AppLinkInput) -> str:
        return _join("client/web_app/open", OpenWebAppReq, request)

    def open_chat(self, request: AppLinkInput) -> str:
        """打开单聊（openId）或群聊（openChatId）"""
        return _join("client/chat/open", OpenChatReq, request)

    def open_calender(self, request: AppLinkInput = None) -> str:
        return _join("client/calendar/open", OpenCalenderReq, request)

    def open_calender_view(self, request: AppLinkInput = None) -> str:
        return _join("client/calendar/view", OpenCalenderViewReq, request)

    def open_calender_event_create(self, request: AppLinkInput = None) -> str:
        return _join("client/calendar/event/create", OpenCalenderEventCreateReq, request)

    def open_calender_account(self, request: AppLinkInput = None) -> str:
        return _join("client/calendar/account", OpenCalenderAccountReq, request)

    def open_docs(self, request: AppLinkInput) -> str:
        return _join("client/docs/open", OpenDocsReq, request)

    def open_bot(self, request: AppLinkInput) -> str:
        return _join("client/bot/open", OpenBotReq, request)

    def open_sso_login(self, request: AppLinkInput) -> str:
        return _join("client/passport/sso_login", OpenSSOLoginReq, request)

    def open_web_url(self, request: AppLinkInput) -> str:
        """在飞书内置浏览器中打开网页"""
        return _join("client/web_url/open", OpenWebURLReq, request)

    def open_task(self, request: AppLinkInput = None) -> str:
        return _join("client/todo/open", OpenTaskReq, request)

    def open_task_create(self, request: AppLinkInput = None) -> str:
        return _join("client/todo/create", OpenTaskCreateReq, request)

    def open_task_detail(self, request: AppLinkInput) -> str:
        return _join("client/todo/detail", OpenTaskDetailReq, request)

    def open_task_tab(self, request: AppLinkInput) -> str:
        return _join("client/todo/view", OpenTaskTabReq, request)

    def open_scan(self, request: AppLinkInput = None) -> str:
        return _join("client/qrcode/main", OpenScanReq, request)
