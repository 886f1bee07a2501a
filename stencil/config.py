# stencil/config.py
"""
Configuration management for Stencil.
Uses TOML format for configuration files.
"""
import os
import sys
from pathlib import Path
from typing import List, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from stencil.constants import (
    CONFIG_FILE, DEFAULT_PROJECT_NAME, DEFAULT_RESERVED_NAMES,
    INDENT_UNIT, LOCALIZED_TEXT_TYPE, VCS_BACKENDS,
)
from stencil.utils.logging import get_logger

logger = get_logger(__name__)


# --- Configuration Models ---

class ProjectConfig(BaseModel):
    """Project identity used for export macros."""
    name: str = Field(DEFAULT_PROJECT_NAME, description="Project/module name the export macro is derived from")


class EmitterConfig(BaseModel):
    """Lexical settings for generated output."""
    indent_unit: str = Field(INDENT_UNIT, description="Text emitted once per indent level")
    localized_text_type: str = Field(LOCALIZED_TEXT_TYPE, description="Type that receives a generated localized accessor")
    reserved_names: List[str] = Field(
        default_factory=lambda: list(DEFAULT_RESERVED_NAMES),
        description="Localized-text property names that never get a generated accessor",
    )


class VcsConfig(BaseModel):
    """Version control settings."""
    backend: str = Field("none", description="Version control backend: none, git or perforce")
    uses_checkout: Optional[bool] = Field(None, description="Override whether files must be checked out before editing")

    @field_validator("backend")
    @classmethod
    def _known_backend(cls, value: str) -> str:
        value = value.lower()
        if value not in VCS_BACKENDS:
            raise ValueError(f"Unknown VCS backend '{value}', expected one of {', '.join(VCS_BACKENDS)}")
        return value


class AppConfig(BaseModel):
    """Application configuration settings."""
    project: ProjectConfig = Field(default_factory=ProjectConfig, description="Project configuration")
    emitter: EmitterConfig = Field(default_factory=EmitterConfig, description="Emitter configuration")
    vcs: VcsConfig = Field(default_factory=VcsConfig, description="Version control configuration")
    debug: bool = Field(False, description="Enable debug mode")


# --- Configuration Manager ---

class ConfigManager:
    """Manages the configuration for Stencil using TOML."""

    def __init__(self, config_file: Path = CONFIG_FILE):
        self.config_file = Path(config_file)
        self._config: AppConfig = AppConfig()
        self._load_environment()

    def _load_environment(self) -> None:
        """Overlays settings from environment variables and a .env file."""
        load_dotenv()
        project_name = os.getenv("STENCIL_PROJECT_NAME")
        if project_name:
            self._config.project.name = project_name
        vcs_backend = os.getenv("STENCIL_VCS_BACKEND")
        if vcs_backend:
            try:
                self._config.vcs = VcsConfig(backend=vcs_backend, uses_checkout=self._config.vcs.uses_checkout)
            except ValidationError as e:
                logger.error(f"Ignoring STENCIL_VCS_BACKEND: {e}")

    def _reset(self) -> None:
        self._config = AppConfig()
        self._load_environment()

    def load_config(self) -> None:
        """Loads configuration from the TOML config file."""
        if not self.config_file.exists():
            logger.debug(f"Configuration file not found at '{self.config_file}'. Using defaults.")
            return

        try:
            logger.debug(f"Loading configuration from: {self.config_file}")
            with open(self.config_file, "rb") as f:  # TOML requires binary read mode
                config_data = tomllib.load(f)
            self._config = AppConfig.model_validate(config_data)
            self._load_environment()

        except tomllib.TOMLDecodeError as e:
            logger.error(f"Error decoding TOML configuration file ({self.config_file}): {e}")
            logger.error("Using default configuration and environment variables.")
            self._reset()
        except ValidationError as e:
            logger.error(f"Invalid configuration in {self.config_file}: {e}")
            logger.error("Using default configuration and environment variables.")
            self._reset()
        except OSError as e:
            logger.error(f"I/O error accessing configuration file {self.config_file}: {e}")
            logger.error("Using default configuration and environment variables.")
            self._reset()

    def save_config(self) -> Path:
        """Saves the current configuration to the config file (as TOML)."""
        config_dict = self._config.model_dump(exclude_none=True)
        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "wb") as f:
            tomli_w.dump(config_dict, f)
        logger.info(f"Configuration saved to {self.config_file}")
        return self.config_file

    @property
    def config(self) -> AppConfig:
        """Provides access to the current application configuration."""
        return self._config


# --- Global Instance ---

config_manager = ConfigManager()
config_manager.load_config()
