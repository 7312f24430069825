from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    validate_buckets: bool = False  # check bucket map invariants before each operation
    log_level: str = "WARNING"

    model_config = {"env_prefix": "LEITNER_"}


settings = Settings()
