"""
Jammit.config_services
-------------------------
This module provides a unified config import process

Key Features:
    - Imports configuration from a static .env file and exposes it to other modules

Dependencies:
    - configparser
"""

from configparser import ConfigParser
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent

cfg = ConfigParser()
cfg.read(BASE_DIR / ".env")
