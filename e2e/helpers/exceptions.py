"""
Exception hierarchy for the e2e helpers
Third-party errors are wrapped before they reach test code
"""


class HelpersError(Exception):
    """Base exception for all helper errors"""


class InvalidWordCountError(HelpersError, ValueError):
    """Raised when a mnemonic of an unsupported length is requested"""

    def __init__(self, word_count):
        super().__init__(f"Unsupported number of mnemonic words: {word_count}")
        self.word_count = word_count


class UnsupportedPlatformError(HelpersError, ValueError):
    """Raised when the host platform is not linux, macOS or Windows"""

    def __init__(self, platform_id: str):
        super().__init__(f"Unsupported platform: {platform_id!r}")
        self.platform_id = platform_id


class DownloadError(HelpersError, OSError):
    """Raised when an HTTP download fails before a response is received"""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Download of {url} failed: {reason}")
        self.url = url
        self.reason = reason
