"""
VehicleAnalytics - Configuration Management

This module handles loading and validating configuration from environment variables
with optional .env file support.
"""

import os
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


@dataclass
class ServerConfig:
    """Configuration for the dashboard/API server."""
    host: str = "127.0.0.1"
    port: int = 8050
    debug: bool = False


@dataclass
class MockDataConfig:
    """Configuration for the mock registration data source."""
    record_count: int = 500
    start_date: date = date(2023, 1, 1)
    end_date: date = date(2024, 12, 31)
    seed: Optional[int] = None
    source_label: str = "Mock Data (Demo)"


@dataclass
class ExportConfig:
    """Configuration for listing and export operations."""
    default_limit: int = 100
    max_limit: int = 10000


@dataclass
class Config:
    """
    Main configuration class that aggregates all configuration sections.

    Loads configuration from environment variables with .env file support.
    Every setting has a default, so an empty environment is valid.
    """
    server: ServerConfig = field(default_factory=ServerConfig)
    mock_data: MockDataConfig = field(default_factory=MockDataConfig)
    export: ExportConfig = field(default_factory=ExportConfig)

    # Paths
    data_dir: Path = field(default_factory=lambda: Path("data"))
    log_dir: Path = field(default_factory=lambda: Path("data/logs"))
    export_dir: Path = field(default_factory=lambda: Path("data/exports"))

    def __post_init__(self):
        """Load configuration from environment after initialization."""
        # Load .env file if it exists
        env_file = Path(".env")
        if env_file.exists():
            load_dotenv(env_file)

        self.server = ServerConfig(
            host=os.getenv("DASH_HOST", "127.0.0.1"),
            port=self._get_int_env("DASH_PORT", 8050),
            debug=self._get_bool_env("DASH_DEBUG", False)
        )

        seed_value = os.getenv("MOCK_DATA_SEED")
        self.mock_data = MockDataConfig(
            record_count=self._get_int_env("MOCK_RECORD_COUNT", 500),
            start_date=self._get_date_env("MOCK_START_DATE", date(2023, 1, 1)),
            end_date=self._get_date_env("MOCK_END_DATE", date(2024, 12, 31)),
            seed=self._get_int_env("MOCK_DATA_SEED", 0) if seed_value else None,
            source_label=os.getenv("MOCK_SOURCE_LABEL", "Mock Data (Demo)")
        )

        self.export = ExportConfig(
            default_limit=self._get_int_env("PAGE_LIMIT", 100),
            max_limit=self._get_int_env("MAX_PAGE_LIMIT", 10000)
        )

        self.data_dir = Path(os.getenv("DATA_DIR", "data"))
        self.log_dir = self.data_dir / "logs"
        self.export_dir = self.data_dir / "exports"

        if self.mock_data.start_date > self.mock_data.end_date:
            raise ValueError("MOCK_START_DATE must not be after MOCK_END_DATE")

    def _get_int_env(self, key: str, default: int) -> int:
        """
        Get an integer environment variable.

        Args:
            key: Environment variable name
            default: Value used when the variable is not set

        Returns:
            Parsed integer

        Raises:
            ValueError: If the variable is set but not an integer
        """
        value = os.getenv(key)
        if value is None or value.strip() == "":
            return default
        try:
            return int(value)
        except ValueError as e:
            raise ValueError(f"Environment variable {key} must be an integer, got {value!r}") from e

    def _get_bool_env(self, key: str, default: bool) -> bool:
        """Get a boolean environment variable (1/true/yes/on)."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.strip().lower() in ("1", "true", "yes", "on")

    def _get_date_env(self, key: str, default: date) -> date:
        """
        Get an ISO date (YYYY-MM-DD) environment variable.

        Raises:
            ValueError: If the variable is set but not a valid date
        """
        value = os.getenv(key)
        if value is None or value.strip() == "":
            return default
        try:
            return date.fromisoformat(value.strip())
        except ValueError as e:
            raise ValueError(f"Environment variable {key} must be a YYYY-MM-DD date, got {value!r}") from e

    def ensure_directories(self) -> None:
        """Create data directories if they don't exist."""
        for directory in [self.data_dir, self.log_dir, self.export_dir]:
            directory.mkdir(parents=True, exist_ok=True)
