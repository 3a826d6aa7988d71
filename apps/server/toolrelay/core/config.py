from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "example-server"
    app_version: str = "1.0.0"
    env: str = "dev"

    # Read by the transport glue only (PORT)
    port: int = 9512
    log_level: str = "DEBUG"

    # priceoracle upstream
    price_api_base_url: str = "https://api.coingecko.com/api/v3"
    price_timeout_s: float = 10.0
