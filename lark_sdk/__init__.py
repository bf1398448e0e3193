"""
lark_sdk - 飞书 / Lark 开放平台异步 SDK

    from lark_sdk import Lark

    async with Lark(app_id="cli_xxx", app_secret="xxx") as lark:
        bot = await lark.bot.get_bot_info()
"""

from .core.client import Lark
from .core.config import Settings
from .core.context import with_user_access_token
from .core.errors import LarkError
from .core.request import Endpoint, RawRequestReq, encode_query, resolve_path
from .core.store import MemoryStore, Store

__all__ = [
    "Lark",
    "LarkError",
    "Settings",
    "Store",
    "MemoryStore",
    "with_user_access_token",
    "Endpoint",
    "RawRequestReq",
    "encode_query",
    "resolve_path",
]
