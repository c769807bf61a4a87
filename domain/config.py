"""
Configuration module for the decision tracker.

All configuration values are loaded from environment variables with sensible defaults.
See .env.example for all available configuration options.
"""
import os
from dataclasses import dataclass, field


def _get_float(key: str, default: float) -> float:
    """Get float from environment variable."""
    return float(os.getenv(key, default))


def _get_int(key: str, default: int) -> int:
    """Get int from environment variable."""
    return int(os.getenv(key, default))


def _get_str(key: str, default: str) -> str:
    """Get string from environment variable."""
    return os.getenv(key, default)


@dataclass
class PaginationConfig:
    """Decision listing page sizes."""
    default_page_size: int = field(default_factory=lambda: _get_int("PAGE_SIZE_DEFAULT", 10))
    max_page_size: int = field(default_factory=lambda: _get_int("PAGE_SIZE_MAX", 1000))


@dataclass
class AnalyticsConfig:
    """Risk bucket thresholds and trend window."""
    trend_months: int = field(default_factory=lambda: _get_int("ANALYTICS_TREND_MONTHS", 6))
    high_risk_min_impact: float = field(default_factory=lambda: _get_float("ANALYTICS_HIGH_RISK_MIN_IMPACT", 8))
    medium_risk_min_impact: float = field(default_factory=lambda: _get_float("ANALYTICS_MEDIUM_RISK_MIN_IMPACT", 5))


@dataclass
class SimilarityConfig:
    """Similar-decision scoring weights and cut-offs."""
    category_weight: float = field(default_factory=lambda: _get_float("SIMILARITY_CATEGORY_WEIGHT", 0.7))
    impact_weight: float = field(default_factory=lambda: _get_float("SIMILARITY_IMPACT_WEIGHT", 0.3))
    threshold: float = field(default_factory=lambda: _get_float("SIMILARITY_THRESHOLD", 0.5))
    limit: int = field(default_factory=lambda: _get_int("SIMILARITY_LIMIT", 5))


@dataclass
class ApiClientConfig:
    """Settings for the HTTP client of the decision API."""
    base_url: str = field(default_factory=lambda: _get_str("DECISION_API_URL", "http://localhost:8000/api"))
    connect_timeout: float = field(default_factory=lambda: _get_float("DECISION_API_CONNECT_TIMEOUT", 2.0))
    read_timeout: float = field(default_factory=lambda: _get_float("DECISION_API_READ_TIMEOUT", 10.0))
    max_attempts: int = field(default_factory=lambda: _get_int("DECISION_API_MAX_ATTEMPTS", 4))
    backoff_multiplier: float = field(default_factory=lambda: _get_float("DECISION_API_BACKOFF_MULTIPLIER", 0.5))
    backoff_max: float = field(default_factory=lambda: _get_float("DECISION_API_BACKOFF_MAX", 8.0))


# Global config instances (lazy loaded)
_pagination_config = None
_analytics_config = None
_similarity_config = None
_api_client_config = None


def get_pagination_config() -> PaginationConfig:
    """Get pagination configuration."""
    global _pagination_config
    if _pagination_config is None:
        _pagination_config = PaginationConfig()
    return _pagination_config


def get_analytics_config() -> AnalyticsConfig:
    """Get analytics configuration."""
    global _analytics_config
    if _analytics_config is None:
        _analytics_config = AnalyticsConfig()
    return _analytics_config


def get_similarity_config() -> SimilarityConfig:
    """Get similarity configuration."""
    global _similarity_config
    if _similarity_config is None:
        _similarity_config = SimilarityConfig()
    return _similarity_config


def get_api_client_config() -> ApiClientConfig:
    """Get API client configuration."""
    global _api_client_config
    if _api_client_config is None:
        _api_client_config = ApiClientConfig()
    return _api_client_config


def reload_config():
    """Force reload of all configuration from environment variables."""
    global _pagination_config, _analytics_config, _similarity_config, _api_client_config
    _pagination_config = PaginationConfig()
    _analytics_config = AnalyticsConfig()
    _similarity_config = SimilarityConfig()
    _api_client_config = ApiClientConfig()
