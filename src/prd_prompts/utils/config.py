"""Configuration settings for the prompt template tool."""
import os
from typing import Optional

from ..templates import TEMPLATE_DIR as BUNDLED_TEMPLATE_DIR


class Config:
    """Application configuration settings."""
    LOG_LEVEL: str = "WARNING"  # Default log level
    UNRESOLVED_POLICY: str = "leave"  # leave, blank or error

    # Templates shipped inside the package
    PACKAGE_TEMPLATE_DIR: str = BUNDLED_TEMPLATE_DIR

    # Optional directory of user templates, searched before the bundled ones
    TEMPLATE_DIR: Optional[str] = None

    # Logs live in the user's home directory, away from the source tree
    _USER_HOME: str = os.path.expanduser("~")
    _DATA_ROOT: str = os.path.join(_USER_HOME, "prd_prompts")
    LOG_DIR: str = os.path.join(_DATA_ROOT, "logs")
