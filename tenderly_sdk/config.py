"""
Tenderly SDK Configuration

从显式参数或环境变量（支持 .env 文件）构造客户端配置。
"""

from typing import Any

from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import InvalidParameterError


DEFAULT_BASE_URL = "https://api.tenderly.co/api/v1"


class TenderlyConfig(BaseSettings):
    """Tenderly 访问配置（构造后不可变）"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="",
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    access_key: SecretStr = Field(..., alias="TENDERLY_ACCESS_KEY")
    account_slug: str = Field(..., min_length=1, alias="TENDERLY_ACCOUNT_SLUG")
    project_slug: str = Field(..., min_length=1, alias="TENDERLY_PROJECT_SLUG")

    base_url: str = Field(default=DEFAULT_BASE_URL, alias="TENDERLY_BASE_URL")
    timeout_seconds: float = Field(default=30.0, gt=0, alias="TENDERLY_TIMEOUT_SECONDS")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """去掉末尾的 '/'，便于拼接路径"""
        return v.rstrip("/")

    @property
    def project_prefix(self) -> str:
        """account/project 级别的 URL 前缀"""
        return f"{self.account_prefix}/project/{self.project_slug}"

    @property
    def account_prefix(self) -> str:
        """account 级别的 URL 前缀"""
        return f"{self.base_url}/account/{self.account_slug}"

    @classmethod
    def from_env(cls, **overrides: Any) -> "TenderlyConfig":
        """
        从环境变量读取配置

        读取 TENDERLY_ACCESS_KEY、TENDERLY_ACCOUNT_SLUG、TENDERLY_PROJECT_SLUG，
        可选 TENDERLY_BASE_URL、TENDERLY_TIMEOUT_SECONDS。
        """
        try:
            return cls(**overrides)
        except ValidationError as e:
            fields = ", ".join(
                str(err["loc"][0]) for err in e.errors() if err.get("loc")
            )
            raise InvalidParameterError(f"Tenderly 配置无效或缺失: {fields}") from None
