"""
URLs of the latest wallet binaries and node configuration files
"""

from typing import Optional, Union

from helpers.config import Settings, get_settings
from helpers.utils.host_platform import Platform, detect_platform


def latest_binary_url(
    platform: Optional[Union[Platform, str]] = None,
    *,
    settings: Optional[Settings] = None,
) -> str:
    """
    URL of the latest binary distribution for platform.

    platform may be a Platform or its value, a raw identifier such as 'darwin', or None
    for the host. Unknown platforms raise UnsupportedPlatformError.
    """
    active = settings or get_settings()
    if not isinstance(platform, Platform):
        try:
            platform = Platform(platform)
        except ValueError:
            platform = detect_platform(platform)
    return active.BINARY_URL_TEMPLATE.format(os=platform.value)


def latest_configs_base_url(*, settings: Optional[Settings] = None) -> str:
    return (settings or get_settings()).CONFIGS_BASE_URL


def latest_config_url(file_name: str, *, settings: Optional[Settings] = None) -> str:
    """URL of a single configuration file, e.g. 'mainnet-config.json'"""
    base = latest_configs_base_url(settings=settings).rstrip("/")
    return f"{base}/{file_name.lstrip('/')}"
