"""
Logging configuration
Helper activity is logged but never includes mnemonic words or secrets
"""

import logging
import re
import sys
from typing import Optional, Set

from helpers.config import get_settings


class SecretFilter(logging.Filter):
    """Filter that redacts sensitive information"""

    SENSITIVE_KEYS: Set[str] = {
        "mnemonic",
        "words",
        "passphrase",
        "password",
        "token",
        "secret",
        "key",
    }

    # key=value pairs, including query parameters such as ?api_token=...
    ASSIGNMENT_PATTERN = re.compile(
        r"\b(\w*(?:" + "|".join(sorted(SENSITIVE_KEYS)) + r"))=([^&\s]+)",
        re.IGNORECASE,
    )

    def filter(self, record: logging.LogRecord) -> bool:
        if hasattr(record, "msg"):
            msg = record.getMessage()
            redacted = self.ASSIGNMENT_PATTERN.sub(r"\1=[REDACTED]", msg)
            if redacted != msg:
                # Only the values are dropped so the rest of the line survives
                record.msg = redacted
                record.args = None
        return True


def setup_logging(level: Optional[str] = None):
    """Configure helper logging for a test run"""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    handler.addFilter(SecretFilter())

    root = logging.getLogger()
    root.setLevel((level or get_settings().LOG_LEVEL).upper())

    # Clear existing handlers to avoid duplicates
    root.handlers = []
    root.addHandler(handler)

    # Reduce noise from the HTTP stack
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


download_logger = logging.getLogger("helpers.download")
filesystem_logger = logging.getLogger("helpers.filesystem")
mnemonics_logger = logging.getLogger("helpers.mnemonics")


def log_download(url: str, status_code: int):
    """Log a completed download with its HTTP status"""
    download_logger.info(f"{url} -> {status_code}")


def log_directory_created(path: str):
    """Log directory creation"""
    filesystem_logger.debug(f"Created directory {path}")


def log_directory_cleared(path: str, removed: int):
    """Log directory cleanup"""
    filesystem_logger.debug(f"Cleared {removed} entries from {path}")


def log_mnemonic_generated(word_count: int):
    """Log mnemonic generation (length only, never the words)"""
    mnemonics_logger.debug(f"Generated {word_count}-word mnemonic")
