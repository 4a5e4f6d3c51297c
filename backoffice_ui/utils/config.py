"""Configuration helpers for the back office UI suite."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path


def get_directory_from_env(env_name: str, default_path: str) -> Path:
    """Return a directory path from env, ensuring it exists."""
    configured = os.environ.get(env_name, "").strip() or default_path
    directory = Path(configured).expanduser().resolve()
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def get_int_from_env(env_name: str, default: int) -> int:
    raw = os.environ.get(env_name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{env_name} must be an integer, got {raw!r}") from exc


def get_bool_from_env(env_name: str, default: bool) -> bool:
    raw = os.environ.get(env_name, "").strip().lower()
    if not raw:
        return default
    return raw in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class UIConfig:
    """Recognized options for browser sessions and page objects."""

    base_url: str = "http://localhost/admin-dev/"
    default_timeout_ms: int = 10_000
    download_dir: Path = field(
        default_factory=lambda: Path(tempfile.gettempdir()) / "backoffice-ui-downloads"
    )
    viewport: dict[str, int] = field(default_factory=lambda: {"width": 1680, "height": 900})
    locale: str = "en-GB"
    headless: bool = True
    login_email: str = "demo@prestashop.com"
    login_password: str = "Correct Horse Battery Staple"

    def __post_init__(self) -> None:
        if self.default_timeout_ms <= 0:
            raise ValueError(
                f"default_timeout_ms must be a positive number of milliseconds, got {self.default_timeout_ms}"
            )


def load_config() -> UIConfig:
    """Build a fresh :class:`UIConfig` from the process environment."""
    base_url = os.environ.get("BO_BASE_URL", "").strip() or UIConfig.base_url
    if not base_url.endswith("/"):
        base_url = f"{base_url}/"

    download_dir = get_directory_from_env(
        "DOWNLOAD_DIR",
        str(Path(tempfile.gettempdir()) / "backoffice-ui-downloads"),
    )

    return UIConfig(
        base_url=base_url,
        default_timeout_ms=get_int_from_env("DEFAULT_TIMEOUT_MS", UIConfig.default_timeout_ms),
        download_dir=download_dir,
        viewport={
            "width": get_int_from_env("VIEWPORT_WIDTH", 1680),
            "height": get_int_from_env("VIEWPORT_HEIGHT", 900),
        },
        locale=os.environ.get("LOCALE", "").strip() or UIConfig.locale,
        headless=get_bool_from_env("HEADLESS", True),
        login_email=os.environ.get("BO_LOGIN_EMAIL", "").strip() or UIConfig.login_email,
        login_password=os.environ.get("BO_LOGIN_PASSWORD", "") or UIConfig.login_password,
    )


@lru_cache(maxsize=1)
def get_config() -> UIConfig:
    """Process-wide configuration, read once."""
    return load_config()
