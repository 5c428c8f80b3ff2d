from __future__ import annotations

from enum import Enum


class InferenceTopic(str, Enum):
    """Special tokens on the inference route; anything else is an asset symbol."""

    MEME = "MEME"
    DEFI = "DeFi"
    NFT = "NFT"
    CRYPTO = "CRYPTO"

    @classmethod
    def for_token(cls, token: str) -> "InferenceTopic":
        for topic in (cls.MEME, cls.DEFI, cls.NFT):
            if token == topic.value:
                return topic
        return cls.CRYPTO
