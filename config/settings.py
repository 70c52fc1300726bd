from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Helius (Solana RPC)
    helius_api_key: str = ""
    helius_rpc_url: str = ""  # overrides the default mainnet URL built from the key

    # Alchemy (EVM RPC)
    alchemy_api_key: str = ""

    # Provider behaviour: every upstream call is bounded by this timeout
    provider_timeout_sec: float = 10.0
    provider_max_rps: float = 10.0
    provider_max_retries: int = 2
    signature_max_pages: int = 5  # getSignaturesForAddress pages (1000 sigs each) for creation time

    # Response cache TTLs
    cache_ttl_new_sec: int = 600  # tokens younger than 24h
    cache_ttl_mature_sec: int = 3600  # 1-7 days and older
    cache_ttl_unknown_sec: int = 1800  # unknown age or no token metadata
    cache_cleanup_interval_sec: int = 300

    # HTTP API
    api_host: str = "0.0.0.0"
    api_port: int = 3000
    api_debug: bool = False
    analyze_rate_limit: str = "30/minute"
    cors_origins: str = "*"  # comma-separated

    # Logging
    log_level: str = "INFO"
    log_dir: str = "logs"
    log_json: bool = False


settings = Settings()
