#!/usr/bin/env python3

"""Signature encoding for the runtime pattern scanner.

A signature such as ``48 8B ?? 10`` is padded with wildcards to a whole number
of 8-byte words and packed into two ``ulong`` arrays: the signature bytes
(wildcards zeroed) and a mask with ``FF`` for every byte that must match.
Words are little-endian, so the first token of a group is the least
significant byte.
"""

import re
from dataclasses import dataclass

from ...errors import MalformedSignatureError
from ...models.interop import SignatureInfo

WILDCARD = "??"
WORD_SIZE = 8
MAX_RELATIVE_OFFSET = 0xFF

_HEX_BYTE_PATTERN = re.compile(r"[0-9A-Fa-f]{2}")


@dataclass(frozen=True)
class EncodedSignature:
    """Packed form of a signature as consumed by the resolver."""

    padded_signature: str
    relocation_offsets: tuple[int, ...]
    signature_words: tuple[int, ...]
    mask_words: tuple[int, ...]


def tokenize_signature(signature: str) -> list[str]:
    """Split a signature into tokens, rejecting anything but hex bytes and ``??``.

    Raises:
        MalformedSignatureError: If a token is not a valid byte or wildcard
    """
    tokens = signature.split()
    for position, token in enumerate(tokens):
        if token != WILDCARD and not _HEX_BYTE_PATTERN.fullmatch(token):
            raise MalformedSignatureError(signature, position, token)
    return tokens


def _pad_tokens(tokens: list[str]) -> list[str]:
    remainder = len(tokens) % WORD_SIZE
    if remainder == 0:
        return list(tokens)
    return tokens + [WILDCARD] * (WORD_SIZE - remainder)


def pad_signature(signature: str) -> str:
    """Pad a signature with wildcards to the next multiple of 8 tokens."""
    return " ".join(_pad_tokens(tokenize_signature(signature)))


def _pack_words(byte_values: list[int]) -> tuple[int, ...]:
    words = []
    for start in range(0, len(byte_values), WORD_SIZE):
        group = byte_values[start : start + WORD_SIZE]
        word = 0
        for shift, value in enumerate(group):
            word |= value << (8 * shift)
        words.append(word)
    return tuple(words)


def decode_words(words: tuple[int, ...] | list[int]) -> list[int]:
    """Unpack little-endian 64-bit words back into their byte sequence."""
    return [(word >> (8 * shift)) & 0xFF for word in words for shift in range(WORD_SIZE)]


def encode_signature(signature_info: SignatureInfo) -> EncodedSignature:
    """Encode a signature into the packed representation used by the resolver.

    Args:
        signature_info: Signature to encode

    Returns:
        Padded pattern, relocation offsets and packed signature/mask words

    Raises:
        MalformedSignatureError: On an invalid token or an offset outside a byte
    """
    padded = _pad_tokens(tokenize_signature(signature_info.signature))

    for offset in signature_info.relative_follow_offsets:
        if not 0 <= offset <= MAX_RELATIVE_OFFSET:
            raise MalformedSignatureError(
                signature_info.signature,
                offset,
                str(offset),
                reason=f"relative offset {offset} does not fit in a byte",
            )

    signature_bytes = [0 if token == WILDCARD else int(token, 16) for token in padded]
    mask_bytes = [0x00 if token == WILDCARD else 0xFF for token in padded]

    return EncodedSignature(
        padded_signature=" ".join(padded),
        relocation_offsets=tuple(signature_info.relative_follow_offsets),
        signature_words=_pack_words(signature_bytes),
        mask_words=_pack_words(mask_bytes),
    )
