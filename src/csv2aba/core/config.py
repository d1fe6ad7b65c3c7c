"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

from csv2aba.models.sender import SenderProfile


class SenderConfig(BaseSettings):
    """Identity of the user supplying the ABA file."""

    model_config = {"env_prefix": "CSV2ABA_SENDER_"}

    institution_code: str = "CBA"  # APCA approved FI abbreviation
    name: str = "Meya"
    user_id: int = 0  # APCA user identification number
    description: str = "PAYROLL"
    remitter_name: str = ""  # "" means use name
    reel_sequence: int = 1

    def to_profile(self) -> SenderProfile:
        return SenderProfile(
            institution_code=self.institution_code,
            name=self.name,
            user_id=self.user_id,
            description=self.description,
            remitter_name=self.remitter_name or self.name,
            reel_sequence=self.reel_sequence,
        )


class S3Config(BaseSettings):
    """S3 file storage configuration."""

    model_config = {"env_prefix": "CSV2ABA_S3_"}

    bucket: str = "csv2aba-payment-files"
    region: str = "ap-southeast-2"
    endpoint_url: str | None = None  # LocalStack override


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "CSV2ABA_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    sender: SenderConfig = Field(default_factory=SenderConfig)
    s3: S3Config = Field(default_factory=S3Config)
