class DomainError(Exception):
    """Base class for domain-specific errors."""


class DataProviderError(DomainError):
    """Raised when a data provider fails to deliver valid data."""


class EmptyCandleSetError(DataProviderError):
    """Raised when the exchange returns no klines for the requested window."""


class ForecastError(DomainError):
    """Raised when a candle cannot be turned into a forecast."""


class PriceParseError(ForecastError):
    """Raised when a candle price is not a valid decimal number."""


class ZeroOpenPriceError(ForecastError):
    """Raised when the change rate is undefined because the open price is zero."""


class ConfigurationError(DomainError):
    """Raised when a required setting is missing."""


class MissingApiKeyError(ConfigurationError):
    """Raised when the oracle API key is not configured."""


class InvalidRpcConfigurationError(ConfigurationError):
    """Raised when the node RPC base URL is not configured."""


class MemePipelineError(DomainError):
    """Raised when a stage of the meme oracle pipeline fails."""

    LATEST_BLOCK = "latest_block"
    ORACLE = "oracle"
    PRICE = "price"

    def __init__(self, stage: str, message: str) -> None:
        super().__init__(f"{stage}: {message}")
        self.stage = stage
