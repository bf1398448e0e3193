from pydantic_settings import BaseSettings, SettingsConfigDict

FEISHU_OPEN_BASE_URL = "https://open.feishu.cn"
LARK_OPEN_BASE_URL = "https://open.larksuite.com"


class Settings(BaseSettings):
    LARK_APP_ID: str | None = None
    LARK_APP_SECRET: str | None = None
    LARK_ENCRYPT_KEY: str | None = None
    LARK_VERIFICATION_TOKEN: str | None = None

    # Helpdesk
    LARK_HELPDESK_ID: str | None = None
    LARK_HELPDESK_TOKEN: str | None = None

    # Custom bot webhook
    LARK_CUSTOM_BOT_URL: str | None = None
    LARK_CUSTOM_BOT_SECRET: str | None = None

    # ISV (store app) only
    LARK_IS_ISV: bool = False
    LARK_TENANT_KEY: str | None = None

    LARK_OPEN_BASE_URL: str = FEISHU_OPEN_BASE_URL
    LARK_TIMEOUT: float = 30.0  # seconds
    LARK_MAX_RETRIES: int = 0
    LARK_USER_ACCESS_TOKEN: str | None = None

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )
