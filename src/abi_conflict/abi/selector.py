"""Four-byte function selectors under Keccak-256 or SM3."""
from __future__ import annotations

from abc import ABC, abstractmethod

from eth_utils import keccak
from gmssl import func, sm3

__all__ = ["ALL_HASHERS", "BaseHasher", "Keccak256Hasher", "Sm3Hasher", "format_selector", "get_hasher"]

SELECTOR_SIZE = 4


class BaseHasher(ABC):
    name = "base"

    @abstractmethod
    def digest(self, data: bytes) -> bytes: ...

    def selector(self, signature: str) -> int:
        """Big-endian unsigned value of the first four digest bytes."""
        digest = self.digest(signature.encode("utf-8"))
        return int.from_bytes(digest[:SELECTOR_SIZE], "big", signed=False)


class Keccak256Hasher(BaseHasher):
    name = "keccak256"

    def digest(self, data: bytes) -> bytes:
        return keccak(primitive=data)


class Sm3Hasher(BaseHasher):
    name = "sm3"

    def digest(self, data: bytes) -> bytes:
        return bytes.fromhex(sm3.sm3_hash(func.bytes_to_list(data)))


ALL_HASHERS: dict[str, type[BaseHasher]] = {
    Keccak256Hasher.name: Keccak256Hasher,
    Sm3Hasher.name: Sm3Hasher,
}


def get_hasher(gm: bool = False) -> BaseHasher:
    """SM3 in GM mode, Keccak-256 otherwise."""
    return ALL_HASHERS[Sm3Hasher.name if gm else Keccak256Hasher.name]()


def format_selector(selector: int) -> str:
    return f"0x{selector:08x}"
