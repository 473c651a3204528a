from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "MiPush Relay"
    APP_SECRET: str
    USE_SANDBOX: bool = False
    PRODUCTION_HOST: str = "https://api.xmpush.xiaomi.com"
    SANDBOX_HOST: str = "https://sandbox.xmpush.xiaomi.com"
    API_VERSION: str = "v3"
    STATS_API_VERSION: str = "v1"
    REQUEST_TIMEOUT: float = 10.0

    class Config:
        env_file = ".env"
        env_prefix = "MIPUSH_"


settings = Settings()
