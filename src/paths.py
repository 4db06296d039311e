"""Centralized path configuration for the build tooling."""

import os
from pathlib import Path

def get_data_root() -> Path:
    """
    Get the root directory that holds the ``config`` folder.

    Respects the TIKA_BUILD_DATA_DIR environment variable.
    If not set, defaults to the current working directory.
    """
    env_path = os.getenv("TIKA_BUILD_DATA_DIR")
    if env_path:
        return Path(env_path)
    return Path(".")

def get_config_root() -> Path:
    """Get the directory holding catalog and build configuration files."""
    return get_data_root() / "config"

def get_services_root() -> Path:
    """Get the directory holding the shipped provider listings."""
    return get_config_root() / "services"

def get_build_config_file() -> Path:
    """Get the path to the default build configuration file."""
    return get_config_root() / "tika.yaml"

def get_catalog_file() -> Path:
    """Get the path to the default parser catalog file."""
    return get_config_root() / "tika-catalog.yaml"
