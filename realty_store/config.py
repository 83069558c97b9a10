"""Configuration management for realty-store."""

from dataclasses import dataclass, field
from pathlib import Path

from realty_store.exceptions import ConfigurationError

STORAGE_BACKENDS = ("memory", "file")
CORRUPT_POLICIES = ("reset", "raise")


@dataclass
class StorageConfig:
    """Key-value substrate configuration."""

    backend: str = "memory"
    data_dir: Path = field(default_factory=lambda: Path("data"))
    on_corrupt: str = "reset"  # reset: warn and read as empty; raise: CorruptStateError

    def validate(self) -> None:
        """Reject unknown backends and corrupt-state policies."""
        if self.backend not in STORAGE_BACKENDS:
            raise ConfigurationError(
                f"Unknown storage backend {self.backend!r}, expected one of {STORAGE_BACKENDS}"
            )
        if self.on_corrupt not in CORRUPT_POLICIES:
            raise ConfigurationError(
                f"Unknown on_corrupt policy {self.on_corrupt!r}, expected one of {CORRUPT_POLICIES}"
            )


@dataclass
class AccountConfig:
    """Account rules."""

    admin_email: str = "admin@admin.com"
    min_password_length: int = 6


@dataclass
class WatchConfig:
    """Listing change polling configuration."""

    poll_interval_seconds: float = 1.0


@dataclass
class RealtyConfig:
    """Main configuration for realty-store."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    accounts: AccountConfig = field(default_factory=AccountConfig)
    watch: WatchConfig = field(default_factory=WatchConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "RealtyConfig":
        """Create config from environment variables."""
        import os

        storage = StorageConfig(
            backend=os.getenv("REALTY_STORAGE_BACKEND", "memory"),
            data_dir=Path(os.getenv("REALTY_DATA_DIR", "data")),
            on_corrupt=os.getenv("REALTY_ON_CORRUPT", "reset"),
        )
        storage.validate()

        try:
            accounts = AccountConfig(
                admin_email=os.getenv("REALTY_ADMIN_EMAIL", "admin@admin.com"),
                min_password_length=int(os.getenv("REALTY_MIN_PASSWORD_LENGTH", "6")),
            )
            watch = WatchConfig(
                poll_interval_seconds=float(os.getenv("REALTY_POLL_INTERVAL", "1.0")),
            )
            seed = int(os.getenv("REALTY_SEED")) if os.getenv("REALTY_SEED") else None
        except ValueError as exc:
            raise ConfigurationError(f"Invalid numeric setting: {exc}") from exc

        if watch.poll_interval_seconds <= 0:
            raise ConfigurationError("REALTY_POLL_INTERVAL must be positive")

        return cls(
            storage=storage,
            accounts=accounts,
            watch=watch,
            seed=seed,
            log_level=os.getenv("REALTY_LOG_LEVEL", "INFO"),
            log_format=os.getenv("REALTY_LOG_FORMAT", "standard"),
        )
