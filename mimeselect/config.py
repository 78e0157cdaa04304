# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load all configuration from environment variables / .env file
#   once at startup. Provides typed config objects that are passed
#   explicitly to the logging setup and to every stage.
#
# CLASSES:
# --------
# - LoggingConfig (dataclass)
#     level: str                 (default "INFO")
#
# - SearchConfig (dataclass)
#     system_dir: str            (default "/usr/share/applications/")
#     user_dir: str              (default ".local/share/applications/", relative to $HOME)
#     extension: str             (default ".desktop")
#     entry_section: str         (default "Desktop Entry")
#     mime_key: str              (default "MimeType")
#
# - RegistryConfig (dataclass)
#     command: tuple[str, ...]   (default ("xdg-mime", "default"))
#
# - AppConfig (dataclass)
#     logging: LoggingConfig
#     search: SearchConfig
#     registry: RegistryConfig
#
# FUNCTIONS:
# ----------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Drop the singleton (tests).
#
# ENVIRONMENT:
# ------------
#   MIMESELECT_LOG, MIMESELECT_SYSTEM_DIR, MIMESELECT_USER_DIR,
#   MIMESELECT_EXTENSION, MIMESELECT_REGISTRY_COMMAND
#
# ==============================================

import os
import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv


@dataclass
class LoggingConfig:
    """Logging verbosity."""
    level: str = "INFO"


@dataclass
class SearchConfig:
    """Where desktop files are looked for and how they are read."""
    system_dir: str = "/usr/share/applications/"
    user_dir: str = ".local/share/applications/"
    extension: str = ".desktop"
    entry_section: str = "Desktop Entry"
    mime_key: str = "MimeType"


@dataclass
class RegistryConfig:
    """The command that stores a default handler."""
    command: Tuple[str, ...] = ("xdg-mime", "default")


@dataclass
class AppConfig:
    """Main application configuration."""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    registry: RegistryConfig = field(default_factory=RegistryConfig)


# Singleton instance
_config_instance: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env from the directory the tool is run in
    load_dotenv(dotenv_path=Path.cwd() / ".env")

    logging_config = LoggingConfig(
        level=os.getenv("MIMESELECT_LOG", "INFO")
    )

    search_config = SearchConfig(
        system_dir=os.getenv("MIMESELECT_SYSTEM_DIR", "/usr/share/applications/"),
        user_dir=os.getenv("MIMESELECT_USER_DIR", ".local/share/applications/"),
        extension=os.getenv("MIMESELECT_EXTENSION", ".desktop")
    )

    command = shlex.split(os.getenv("MIMESELECT_REGISTRY_COMMAND", "xdg-mime default"))
    registry_config = RegistryConfig(
        command=tuple(command) or RegistryConfig.command
    )

    _config_instance = AppConfig(
        logging=logging_config,
        search=search_config,
        registry=registry_config
    )

    return _config_instance


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() reloads it."""
    global _config_instance
    _config_instance = None
