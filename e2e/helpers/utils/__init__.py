# E2E helper utilities
from helpers.utils.artifacts import latest_binary_url, latest_config_url, latest_configs_base_url
from helpers.utils.download import default_file_name, wget
from helpers.utils.filesystem import clear_directory, ensure_directory
from helpers.utils.host_platform import (
    Platform,
    current_platform_id,
    detect_platform,
    is_linux,
    is_mac,
    is_win,
)
from helpers.utils.mnemonics import (
    SUPPORTED_WORD_COUNTS,
    entropy_bits,
    is_valid_mnemonic,
    mnemonic_sentence,
)

__all__ = [
    "latest_binary_url", "latest_config_url", "latest_configs_base_url",
    "default_file_name", "wget",
    "clear_directory", "ensure_directory",
    "Platform", "current_platform_id", "detect_platform",
    "is_linux", "is_mac", "is_win",
    "SUPPORTED_WORD_COUNTS", "entropy_bits", "is_valid_mnemonic", "mnemonic_sentence",
]
