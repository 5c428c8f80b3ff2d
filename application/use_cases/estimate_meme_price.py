from __future__ import annotations

import math

from domain.entities.prices import MemePriceEstimate
from domain.exceptions.errors import (
    DataProviderError,
    InvalidRpcConfigurationError,
    MemePipelineError,
    MissingApiKeyError,
)
from domain.services.market_data_service import (
    ChainStatusProvider,
    TokenOracleProvider,
    TokenPriceProvider,
)
from domain.services.price_jitter import PriceJitter
from infrastructure.storage.logging.logger import get_component_logger

logger = get_component_logger("meme")


class EstimateMemePrice:
    """Use case pricing the token the oracle picked for the latest block."""

    def __init__(
        self,
        chain_status: ChainStatusProvider,
        token_oracle: TokenOracleProvider,
        token_price: TokenPriceProvider,
        price_jitter: PriceJitter,
        api_key: str | None,
        rpc_url: str | None,
    ) -> None:
        self.chain_status = chain_status
        self.token_oracle = token_oracle
        self.token_price = token_price
        self.price_jitter = price_jitter
        self.api_key = api_key
        self.rpc_url = rpc_url

    def execute(self) -> MemePriceEstimate:
        """
        Run latest block -> oracle token -> market price -> jitter.

        Raises:
            MissingApiKeyError: the oracle API key is not configured
            InvalidRpcConfigurationError: the node RPC URL is not configured
            MemePipelineError: any stage failed; ``stage`` names which one
        """
        if not self.api_key:
            raise MissingApiKeyError("need api key")
        if not self.rpc_url:
            raise InvalidRpcConfigurationError("Invalid RPC configuration")

        try:
            block_height = self.chain_status.get_latest_block_height(self.rpc_url)
        except DataProviderError as exc:
            raise MemePipelineError(MemePipelineError.LATEST_BLOCK, str(exc)) from exc

        try:
            token = self.token_oracle.get_token_for_block(block_height, self.api_key)
        except DataProviderError as exc:
            raise MemePipelineError(MemePipelineError.ORACLE, str(exc)) from exc

        try:
            raw_price = self.token_price.get_token_price(token.platform, token.address)
        except DataProviderError as exc:
            raise MemePipelineError(MemePipelineError.PRICE, str(exc)) from exc

        try:
            market_price = float(raw_price)
        except ValueError as exc:
            raise MemePipelineError(
                MemePipelineError.PRICE, f"Token price is not a number: {raw_price!r}"
            ) from exc
        if not math.isfinite(market_price):
            raise MemePipelineError(
                MemePipelineError.PRICE, f"Token price is not finite: {raw_price!r}"
            )

        logger.info(
            'BlockHeight: "%s", Meme: "%s", Platform: "%s", Price: "%s"',
            block_height,
            token.token_symbol,
            token.platform,
            raw_price,
        )
        return MemePriceEstimate(
            block_height=block_height,
            token=token,
            market_price=market_price,
            price=self.price_jitter.apply(market_price),
        )
