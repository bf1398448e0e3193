"""
AppLink 参数模型

字段名与 AppLink 协议的 query 参数保持一致（包括 appId、URL 等大小写），
所有值按字符串处理。
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class AppLinkReq(BaseModel):
    model_config = ConfigDict(extra="forbid")


class OpenLarkReq(AppLinkReq):
    pass


class OpenMiniProgramReq(AppLinkReq):
    appId: str
    mode: Optional[str] = None  # sidebar-semi / appCenter / window / window-semi
    height: Optional[str] = None
    width: Optional[str] = None
    relaunch: Optional[str] = None
    path: Optional[str] = None
    path_android: Optional[str] = None
    path_ios: Optional[str] = None
    path_pc: Optional[str] = None
    min_lk_ver: Optional[str] = None


class OpenWebAppReq(AppLinkReq):
    appId: str
    mode: Optional[str] = None  # appCenter / window / sidebar / window-semi
    height: Optional[str] = None
    width: Optional[str] = None
    path: Optional[str] = None
    path_android: Optional[str] = None
    path_ios: Optional[str] = None
    path_pc: Optional[str] = None
    lk_target_url: Optional[str] = None


class OpenChatReq(AppLinkReq):
    openId: Optional[str] = None
    openChatId: Optional[str] = None


class OpenCalenderReq(AppLinkReq):
    pass


class OpenCalenderViewReq(AppLinkReq):
    type: Optional[str] = None  # day / three_day / week / month / meeting / list
    date: Optional[str] = None  # unix 时间戳


class OpenCalenderEventCreateReq(AppLinkReq):
    startTime: Optional[str] = None
    endTime: Optional[str] = None
    summary: Optional[str] = None


class OpenCalenderAccountReq(AppLinkReq):
    pass


class OpenDocsReq(AppLinkReq):
    URL: str


class OpenBotReq(AppLinkReq):
    appId: str


class OpenSSOLoginReq(AppLinkReq):
    sso_domain: str
    tenant_name: str


class OpenWebURLReq(AppLinkReq):
    url: str
    mode: str  # sidebar-semi / window
    height: Optional[str] = None
    width: Optional[str] = None


class OpenTaskReq(AppLinkReq):
    pass


class OpenTaskCreateReq(AppLinkReq):
    pass


class OpenTaskDetailReq(AppLinkReq):
    guid: str
    mode: Optional[str] = None  # app: 在任务 tab 中打开


class OpenTaskTabReq(AppLinkReq):
    tab: str  # all / assign_to_me / assign_from_me / followed / completed


class OpenScanReq(AppLinkReq):
    pass
