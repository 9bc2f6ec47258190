from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = "sqlite+pysqlite:///./nova_mobility.db"
    sql_echo: bool = False
    log_level: str = "INFO"
    maintenance_battery_threshold: int = 30

    model_config = SettingsConfigDict(env_file=".env", env_prefix="")


settings = Settings()
