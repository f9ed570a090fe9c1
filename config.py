"""Configuration for the Prometheus exporter"""
from pathlib import Path
from typing import List, Literal, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


SUPPORTED_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH")


class Config(BaseSettings):
    """Exporter configuration read from environment variables"""

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

    # Server settings
    metrics_host: str = Field(default="0.0.0.0", description="Metrics server host")
    metrics_port: int = Field(default=32221, ge=1, le=65535, description="Metrics server port")
    metrics_methods_str: str = Field(default="GET,POST", description="HTTP methods accepted on /metrics (comma-separated)")

    # Optional HTTP Basic credentials for /metrics
    basic_auth_username: Optional[str] = Field(default=None, description="Basic auth username")
    basic_auth_password: Optional[str] = Field(default=None, description="Basic auth password")

    # Folder size collector
    folder_paths_str: str = Field(default="/var/log,/tmp", description="Folders to measure (comma-separated)")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", description="Log level")
    log_file: Optional[Path] = Field(default=None, description="Log file path, stdout only when unset")

    # Service settings
    service_name: str = Field(default="prometheus-exporter", description="Service name")
    service_version: str = Field(default="1.0.0", description="Service version")
    enable_request_logging: bool = Field(default=True, description="Enable HTTP request logging")

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator('metrics_methods_str')
    @classmethod
    def validate_metrics_methods(cls, v):
        """Reject methods the server cannot route"""
        methods = [item.strip().upper() for item in v.split(',') if item.strip()]
        if not methods:
            raise ValueError("METRICS_METHODS_STR must name at least one method")
        unknown = [m for m in methods if m not in SUPPORTED_METHODS]
        if unknown:
            raise ValueError(f"Unsupported HTTP methods: {', '.join(unknown)}")
        return v

    @field_validator('log_file')
    @classmethod
    def ensure_log_directory(cls, v):
        if isinstance(v, Path):
            v.parent.mkdir(parents=True, exist_ok=True)
        return v

    @property
    def metrics_methods(self) -> List[str]:
        """Get accepted /metrics methods as an uppercase list"""
        return [item.strip().upper() for item in self.metrics_methods_str.split(',') if item.strip()]

    @property
    def folder_paths(self) -> List[str]:
        """Get measured folders as a list"""
        return [item.strip() for item in self.folder_paths_str.split(',') if item.strip()]

    @property
    def basic_auth_enabled(self) -> bool:
        return bool(self.basic_auth_username)
