"""
Readability scores for English text.
"""

from .exceptions import WordListError
from .logging_config import configure_logging
from .models import ReadabilityScoreResult
from .options import (
    DEFAULT_OPTIONS,
    AllExceptSkipped,
    InternalConfig,
    Metric,
    OnlyMetric,
    ReadabilityOptions,
    resolve_config,
    select_metrics
)
from .scorer import ReadabilityScorer, readability_scores, scorer
from .settings import Settings, settings

__all__ = [
    "DEFAULT_OPTIONS",
    "AllExceptSkipped",
    "InternalConfig",
    "Metric",
    "OnlyMetric",
    "ReadabilityOptions",
    "ReadabilityScoreResult",
    "ReadabilityScorer",
    "Settings",
    "WordListError",
    "configure_logging",
    "readability_scores",
    "resolve_config",
    "scorer",
    "select_metrics",
    "settings"
]
