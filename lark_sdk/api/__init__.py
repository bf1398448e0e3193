"""
飞书开放平台 API 层 - 按领域划分的接口模块

每个模块只声明 Endpoint 表和对应的方法，实际请求由 Lark.raw_request 统一分发。

模块:
- AuthAPI: 应用凭证（tenant / app access token, app_ticket）
- BotAPI / TenantAPI / EventAPI / PassportAPI / JssdkAPI
- FileAPI / MessageAPI / ChatAPI / ContactAPI
- BitableAPI: 多维表格
- HelpdeskAPI: 服务台
- AppLinkAPI: 本地生成 AppLink，不发请求

使用示例:
    from lark_sdk import Lark

    async with Lark(app_id="cli_xxx", app_secret="xxx") as lark:
        records = await lark.bitable.get_bitable_record_list(
            GetBitableRecordListReq(app_token="bascn", table_id="tbl")
        )
"""

from .applink import AppLinkAPI
from .auth import AuthAPI
from .bitable import BitableAPI
from .bot import BotAPI
from .chat import ChatAPI
from .contact import ContactAPI
from .event import EventAPI
from .file import FileAPI
from .helpdesk import HelpdeskAPI
from .jssdk import JssdkAPI
from .message import MessageAPI
from .passport import PassportAPI
from .tenant import TenantAPI

__all__ = [
    "AppLinkAPI",
    "AuthAPI",
    "BitableAPI",
    "BotAPI",
    "ChatAPI",
    "ContactAPI",
    "EventAPI",
    "FileAPI",
    "HelpdeskAPI",
    "JssdkAPI",
    "MessageAPI",
    "PassportAPI",
    "TenantAPI",
]
