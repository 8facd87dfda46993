"""Configuration management using pydantic-settings."""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

from homecare_site.schemas import SiteConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    business_name: str = Field(
        default="Deddeh & Tyler Homecare", validation_alias="BUSINESS_NAME"
    )
    phone_tel: str = Field(default="+12536914318", validation_alias="PHONE_TEL")
    display_phone: str = Field(default="(253) 691-4318", validation_alias="DISPLAY_PHONE")
    intake_email: str = Field(
        default="deddeh@deddehtylerhomecare.com", validation_alias="INTAKE_EMAIL"
    )
    # Must be the exact form endpoint or the relay answers "Form not found".
    relay_endpoint: str = Field(
        default="https://formspree.io/f/mwvnlrwq",
        validation_alias="INTAKE_RELAY_ENDPOINT",
    )
    # Only true when the agency is licensed for skilled clinical services.
    skilled_clinical_services: bool = Field(
        default=False, validation_alias="SKILLED_CLINICAL_SERVICES"
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    def site_config(self) -> SiteConfig:
        """Build the immutable page configuration, checking its invariants."""
        return SiteConfig(
            business_name=self.business_name,
            phone_tel=self.phone_tel,
            display_phone=self.display_phone,
            intake_email=self.intake_email,
            relay_endpoint=self.relay_endpoint,
            skilled_clinical_services=self.skilled_clinical_services,
        )


settings = Settings()
site_config = settings.site_config()
