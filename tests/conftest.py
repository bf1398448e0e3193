import logging
import sys

import pytest
import pytest_asyncio

from lark_sdk import Lark, MemoryStore, Settings

# Configure logging for tests
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)
logger.info("Test logging configured: level=DEBUG")

BASE_URL = "https://open.feishu.cn"
TENANT_TOKEN_URL = f"{BASE_URL}/open-apis/auth/v3/tenant_access_token/internal"
APP_TOKEN_URL = f"{BASE_URL}/open-apis/auth/v3/app_access_token/internal"


def make_settings(**overrides) -> Settings:
    """构造不读取 .env 文件的配置"""
    return Settings(_env_file=None, **overrides)


def make_lark(store=None, **options) -> Lark:
    options.setdefault("app_id", "cli_test")
    options.setdefault("app_secret", "secret_test")
    return Lark(make_settings(), store=store or MemoryStore(), **options)


@pytest.fixture(autouse=True)
def log_test_start(request):
    """Log test start and end for each test."""
    logger.info("=" * 80)
    logger.info("Starting test: %s", request.node.name)
    yield
    logger.info("Completed test: %s", request.node.name)
    logger.info("=" * 80)


@pytest.fixture(autouse=True)
def clean_lark_env(monkeypatch):
    """避免本机的 LARK_* 环境变量影响测试"""
    for name in Settings.model_fields:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def store():
    return MemoryStore()


@pytest_asyncio.fixture
async def lark(store):
    client = make_lark(store)
    yield client
    await client.aclose()


@pytest.fixture
def mock_tenant_token(respx_mock):
    """mock 自建应用 tenant_access_token 接口"""
    return respx_mock.post(TENANT_TOKEN_URL).respond(
        200,
        json={
            "code": 0,
            "msg": "ok",
            "tenant_access_token": "t-tenant-token",
            "expire": 7200,
        },
    )
