from .base58 import ALPHABET, encode, encode_bytes, decode

__all__ = ["ALPHABET", "encode", "encode_bytes", "decode"]
