from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

# 当前调用链上的 user_access_token，优先级低于单次调用显式传入的 token
user_access_token_context: ContextVar[Optional[str]] = ContextVar(
    "user_access_token", default=None
)


@contextmanager
def with_user_access_token(token: str) -> Iterator[None]:
    """在 with 块内的所有请求使用指定的 user_access_token"""
    reset_token = user_access_token_context.set(token)
    try:
        yield
    finally:
        user_access_token_context.reset(reset_token)
