"""
Jammit.logging_services
-------------------------
This module provides a unified, custom logging service

Key Features:
    - Initiates a logging session under a wrapper class
    - Provides automated logging setup

Dependencies:
    - loguru
"""
# Basics
import sys
from datetime import datetime
# Logging
from loguru import logger
# Services
from jammit.services.config_services import BASE_DIR, cfg


class LoggingService:
    """Provides the logging service for the application."""
    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self.logger = logger
            LoggingService._initialized = True
            self._configure_logger()

    def _configure_logger(self):
        log_dir = BASE_DIR / cfg.get('BACKEND', 'LOG_DIR', fallback='logs')
        log_dir.mkdir(exist_ok=True)
        level = cfg.get('BACKEND', 'LOG_LEVEL', fallback='DEBUG')

        self.logger.remove()  # Remove default handler
        self.logger.add(
            log_dir / f"{datetime.today().strftime('%Y-%m-%d')}.log",
            rotation="1 day",
            format="{time:YYYY-MM-DD HH:mm:ss} - {level} - {message}",
            encoding="utf-8",
            level=level)
        self.logger.add(
            sys.stderr,
            format="{time:HH:mm:ss} | {level: <8} | {message}",
            level="INFO")

    def trace(self, message: str):
        self.logger.trace(message)

    def debug(self, message: str, gathering_id: str = None):
        if gathering_id:
            self.logger.debug(f"'G{gathering_id}' - {message}")
        else:
            self.logger.debug(message)

    def info(self, message: str, gathering_id: str = None):
        if gathering_id:
            self.logger.info(f"'G{gathering_id}' - {message}")
        else:
            self.logger.info(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str):
        self.logger.error(message)

    def log(self, level, message: str):
        """Log a message with a level from the logging module or a loguru level name."""
        if isinstance(level, int):
            level = {10: "DEBUG", 20: "INFO", 30: "WARNING",
                     40: "ERROR", 50: "CRITICAL"}.get(level, "INFO")
        self.logger.log(level, message)

    def new_section(self):
        self.logger.info('-' * 64)


logger_service = LoggingService()
