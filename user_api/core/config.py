from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "User API Server"
    app_version: str = "1.0.0"
    host: str = "localhost"
    port: int = 3000
    log_level: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
