from __future__ import annotations

from typing import Union

from fastapi import FastAPI, HTTPException, Path
from fastapi.responses import PlainTextResponse

from application.policies.best_effort_spot_price import BestEffortSpotPricePolicy
from application.use_cases.aggregate_crypto_price import AggregateCryptoPrice
from application.use_cases.estimate_meme_price import EstimateMemePrice
from application.use_cases.placeholder_metrics import PlaceholderMetrics
from domain.exceptions.errors import (
    DataProviderError,
    ForecastError,
    InvalidRpcConfigurationError,
    MemePipelineError,
    MissingApiKeyError,
)
from domain.services.forecast_estimator import ForecastEstimator
from domain.services.price_jitter import PriceJitter
from domain.services.randomness import TimeSeededRandomSource
from domain.value_objects.inference_topic import InferenceTopic
from infrastructure.config.settings import Settings, load_settings
from infrastructure.data_providers.binance_client import BinanceClient
from infrastructure.data_providers.oracle_clients import (
    GeckoTerminalClient,
    NodeStatusClient,
    UpshotOracleClient,
)
from infrastructure.data_providers.spot_price_clients import CoinGeckoClient, CryptoCompareClient
from infrastructure.storage.logging.logger import SERVICE_LOGGER_NAME, get_logger
from interfaces.controllers.inference_controller import InferenceController
from interfaces.presenters.number_presenter import format_price
from .models import AggregatedPriceResponse, DeFiMetricsResponse, NFTMetricsResponse

MEME_STAGE_MESSAGES = {
    MemePipelineError.LATEST_BLOCK: "Error fetching latest block",
    MemePipelineError.ORACLE: "Error fetching meme oracle data",
    MemePipelineError.PRICE: "Error fetching meme price",
}

InferenceResponse = Union[
    AggregatedPriceResponse, DeFiMetricsResponse, NFTMetricsResponse, PlainTextResponse
]


def build_controller(settings: Settings) -> InferenceController:
    random_source = TimeSeededRandomSource()
    price_jitter = PriceJitter(random_source=random_source)

    aggregate = AggregateCryptoPrice(
        candle_provider=BinanceClient(),
        forecast_estimator=ForecastEstimator(random_source=random_source),
        coingecko=BestEffortSpotPricePolicy(CoinGeckoClient(api_key=settings.coingecko_api_key)),
        cryptocompare=BestEffortSpotPricePolicy(
            CryptoCompareClient(api_key=settings.cryptocompare_api_key)
        ),
    )
    estimate_meme = EstimateMemePrice(
        chain_status=NodeStatusClient(),
        token_oracle=UpshotOracleClient(),
        token_price=GeckoTerminalClient(),
        price_jitter=price_jitter,
        api_key=settings.upshot_api_key,
        rpc_url=settings.rpc_url,
    )
    return InferenceController(
        aggregate_crypto_price=aggregate,
        estimate_meme_price=estimate_meme,
        placeholder_metrics=PlaceholderMetrics(price_jitter=price_jitter),
    )


def create_app(
    settings: Settings | None = None,
    controller: InferenceController | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or load_settings()
    logger = get_logger(SERVICE_LOGGER_NAME, level=settings.log_level)
    controller = controller or build_controller(settings)

    app = FastAPI(
        title="Inference Price API",
        description="Blended price and metric inferences for crypto assets",
        version="1.0.0",
    )

    def _meme() -> PlainTextResponse:
        try:
            estimate = controller.meme()
        except MissingApiKeyError as e:
            logger.error("Meme inference rejected: %s", str(e))
            raise HTTPException(status_code=400, detail="need api key")
        except InvalidRpcConfigurationError as e:
            logger.error("Meme inference rejected: %s", str(e))
            raise HTTPException(status_code=500, detail="Invalid RPC configuration")
        except MemePipelineError as e:
            logger.error("Meme pipeline failed at %s: %s", e.stage, str(e))
            raise HTTPException(status_code=500, detail=MEME_STAGE_MESSAGES[e.stage])

        return PlainTextResponse(format_price(estimate.price))

    def _crypto(token: str) -> AggregatedPriceResponse:
        try:
            result = controller.crypto(token)
        except ForecastError as e:
            logger.error("Forecast error for %s: %s", token, str(e))
            raise HTTPException(status_code=500, detail="Error calculating price change rate")
        except (DataProviderError, ValueError) as e:
            logger.error("Data provider error for %s: %s", token, str(e))
            raise HTTPException(status_code=500, detail="Error fetching klines")

        return AggregatedPriceResponse(
            price=result.price,
            binance_price=result.binance_price,
            coingecko_price=result.coingecko_price,
            cryptocompare_price=result.cryptocompare_price,
        )

    @app.get("/inference/{token}", response_model=None)
    def get_inference(
        token: str = Path(..., description="MEME, DeFi, NFT or an asset symbol (e.g. ETH)"),
    ) -> InferenceResponse:
        """Return the inference for a topic or the blended price for an asset."""
        topic = InferenceTopic.for_token(token)

        if topic is InferenceTopic.MEME:
            return _meme()

        if topic is InferenceTopic.DEFI:
            metrics = controller.defi()
            return DeFiMetricsResponse(
                total_value_locked=metrics.total_value_locked,
                yield_farming_rate=metrics.yield_farming_rate,
                defi_score=metrics.defi_score,
            )

        if topic is InferenceTopic.NFT:
            metrics = controller.nft()
            return NFTMetricsResponse(
                floor_price=metrics.floor_price,
                trading_volume=metrics.trading_volume,
                nft_score=metrics.nft_score,
            )

        return _crypto(token)

    logger.info("FastAPI app created successfully")

    return app
