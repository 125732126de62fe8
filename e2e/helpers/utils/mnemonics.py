"""
BIP39 mnemonic sentences for wallet fixtures
Uses the official mnemonic package for the English wordlist and encoding
"""

import hashlib
import secrets
from typing import List, Sequence, Union

from mnemonic import Mnemonic

from helpers.exceptions import InvalidWordCountError
from helpers.logging_config import log_mnemonic_generated

# Entropy requested per sentence length. Sizes are truncated to whole
# bytes before encoding, so 164 and 196 yield 160 and 192 bits.
WORD_COUNT_TO_ENTROPY_BITS = {
    9: 96,
    12: 128,
    15: 164,
    18: 196,
    21: 224,
    24: 256,
}
SUPPORTED_WORD_COUNTS = tuple(WORD_COUNT_TO_ENTROPY_BITS)

_mnemo = Mnemonic("english")
BIP39_WORDLIST = _mnemo.wordlist

# Entropy lengths Mnemonic.to_mnemonic accepts
_LIBRARY_ENTROPY_BYTES = (16, 20, 24, 28, 32)
_LIBRARY_WORD_COUNTS = (12, 15, 18, 21, 24)


def entropy_bits(word_count: int) -> int:
    """Return the entropy size in bits for a supported sentence length"""
    if isinstance(word_count, bool) or not isinstance(word_count, int):
        raise InvalidWordCountError(word_count)
    try:
        return WORD_COUNT_TO_ENTROPY_BITS[word_count]
    except KeyError:
        raise InvalidWordCountError(word_count) from None


def _encode_entropy(data: bytes) -> str:
    """
    BIP39 encoding for entropy sizes the library rejects (96 bits)
    Entropy bits followed by ENT/32 checksum bits, 11 bits per word
    """
    checksum_bits = len(data) * 8 // 32
    digest = hashlib.sha256(data).digest()
    entropy = bin(int.from_bytes(data, "big"))[2:].zfill(len(data) * 8)
    checksum = bin(int.from_bytes(digest, "big"))[2:].zfill(256)[:checksum_bits]
    bits = entropy + checksum
    return " ".join(
        BIP39_WORDLIST[int(bits[i:i + 11], 2)] for i in range(0, len(bits), 11)
    )


def _checksum_matches(words: List[str]) -> bool:
    """Verify the BIP39 checksum of a sentence of any supported length"""
    try:
        bits = "".join(bin(BIP39_WORDLIST.index(word))[2:].zfill(11) for word in words)
    except ValueError:
        return False

    checksum_bits = len(bits) // 33
    entropy_len = len(bits) - checksum_bits
    data = int(bits[:entropy_len], 2).to_bytes(entropy_len // 8, "big")
    digest = hashlib.sha256(data).digest()
    expected = bin(int.from_bytes(digest, "big"))[2:].zfill(256)[:checksum_bits]
    return bits[entropy_len:] == expected


def mnemonic_sentence(word_count: int = 15) -> List[str]:
    """
    Generate a random English mnemonic of word_count words
    Raises InvalidWordCountError before drawing entropy for unsupported lengths
    """
    data = secrets.token_bytes(entropy_bits(word_count) // 8)

    if len(data) in _LIBRARY_ENTROPY_BYTES:
        sentence = _mnemo.to_mnemonic(data)
    else:
        sentence = _encode_entropy(data)

    words = sentence.split()
    log_mnemonic_generated(len(words))
    return words


def is_valid_mnemonic(words: Union[str, Sequence[str]]) -> bool:
    """Check wordlist membership and checksum of a mnemonic sentence"""
    if isinstance(words, str):
        word_list = words.lower().split()
    else:
        word_list = [word.lower().strip() for word in words]

    if len(word_list) not in SUPPORTED_WORD_COUNTS:
        return False

    if len(word_list) in _LIBRARY_WORD_COUNTS:
        return _mnemo.check(" ".join(word_list))

    return _checksum_matches(word_list)
