"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class AuthConfig(BaseSettings):
    """Identity service configuration."""

    model_config = {"env_prefix": "DOCCAT_AUTH_"}

    provider: Literal["jwt", "static"] = "static"
    jwt_secret: str = ""
    issuer: str = ""
    audience: str = "authenticated"
    # token -> user id, only used by the static provider
    static_tokens: dict[str, str] = {}


class DynamoDBConfig(BaseSettings):
    """DynamoDB configuration."""

    model_config = {"env_prefix": "DOCCAT_DYNAMO_"}

    table_suffix: str = ""  # "-dev", "-uat", or "" for prod
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override


class RedisConfig(BaseSettings):
    """Redis session cache configuration."""

    model_config = {"env_prefix": "DOCCAT_REDIS_"}

    enabled: bool = False
    host: str = "localhost"
    port: int = 6379
    db: int = 0
    session_ttl: int = 3600


class WorkflowConfig(BaseSettings):
    """Categorization workflow behaviour."""

    model_config = {"env_prefix": "DOCCAT_WORKFLOW_"}

    required_dimensions: list[str] = ["authorship", "disclosure-risk", "intended-use"]
    submit_delay_seconds: float = 2.0
    processing_estimate: str = "5-10 minutes"
    enforce_required_tags: bool = False
    state_dir: str = ".doccat"


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "DOCCAT_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    persistence: Literal["memory", "dynamodb"] = "memory"

    auth: AuthConfig = AuthConfig()
    dynamodb: DynamoDBConfig = DynamoDBConfig()
    redis: RedisConfig = RedisConfig()
    workflow: WorkflowConfig = WorkflowConfig()
