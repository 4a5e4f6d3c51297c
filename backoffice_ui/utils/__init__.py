"""Helpers for configuration, logging, browser sessions, files and reporting."""

from .browser import (
    BrowserSession,
    close_session,
    create_session,
    download_dir_for_tab,
    go_to,
    new_tab,
    session_for_tab,
)
from .config import UIConfig, get_config, get_directory_from_env, load_config
from .files import delete_file, does_file_exist, generate_image
from .logging_utils import configure_json_logging
from .test_context import ContextItem, add_context_item

__all__ = [
    "BrowserSession",
    "ContextItem",
    "UIConfig",
    "add_context_item",
    "close_session",
    "configure_json_logging",
    "create_session",
    "delete_file",
    "does_file_exist",
    "download_dir_for_tab",
    "generate_image",
    "get_config",
    "get_directory_from_env",
    "go_to",
    "load_config",
    "new_tab",
    "session_for_tab",
]
