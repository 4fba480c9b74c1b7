from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


class DatabaseSettings(BaseSettings):
    database_url: str = Field("sqlite:///./petpals.db")
    pool_size: int = Field(20)
    max_overflow: int = Field(30)
    pool_timeout: int = Field(60)  # seconds
    pool_recycle: int = Field(3600)  # recycle connections every hour
    pool_pre_ping: bool = Field(True)
    create_tables: bool = Field(True)


class SMTPSettings(BaseSettings):
    smtp_server: str = Field("smtp.gmail.com")
    smtp_port: int = Field(587)
    sender_email: str = Field("noreply@petpals.local")
    sender_password: str = Field("")
    use_tls: bool = Field(True)


class NotifierSettings(BaseSettings):
    enabled: bool = Field(True)
    poll_interval_seconds: float = Field(60.0)
    dispatch_timeout_seconds: float = Field(30.0)
    subject: str = Field("Event Notification")
    dry_run: bool = Field(False)  # log reminders instead of sending email


class AppSettings(BaseSettings):
    debug: bool = Field(False)
    allowed_hosts: str = Field("http://localhost:3000,http://localhost:8000")
    rate_limit: str = Field("120/minute")
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    smtp: SMTPSettings = Field(default_factory=SMTPSettings)
    notifier: NotifierSettings = Field(default_factory=NotifierSettings)

    @classmethod
    def _split_allowed_hosts(cls, v: str) -> List[str]:
        if not v or not v.strip():
            return []
        hosts = []
        for host in v.split(","):
            host = host.strip().rstrip("/")
            if host.startswith("http://") or host.startswith("https://"):
                hosts.append(host)
        return hosts

    @property
    def allowed_hosts_list(self) -> List[str]:
        """Convert allowed_hosts string to list."""
        if not self.allowed_hosts:
            return ["http://localhost:3000", "http://localhost:8000"]
        return self._split_allowed_hosts(self.allowed_hosts)

    class Config:
        env_prefix = "APP_"
        case_sensitive = False
        env_nested_delimiter = "__"
        env_file = str(Path(__file__).parent.parent.parent / ".env")
        env_file_encoding = "utf-8"
        extra = "ignore"


settings: AppSettings = AppSettings()

if __name__ == "__main__":
    print(settings.model_dump())
