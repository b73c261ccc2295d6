#!/usr/bin/env python3

"""Signature encoding services."""

from .signature_encoder import (
    WILDCARD,
    WORD_SIZE,
    EncodedSignature,
    decode_words,
    encode_signature,
    pad_signature,
    tokenize_signature,
)

__all__ = [
    "EncodedSignature",
    "WILDCARD",
    "WORD_SIZE",
    "decode_words",
    "encode_signature",
    "pad_signature",
    "tokenize_signature",
]
