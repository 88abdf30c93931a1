"""
User options and their resolution into the internal scoring configuration.

Users pass a sparse set of flags. Metric selection works in one of two modes:
a single "only" metric, picked by a fixed priority order, or every metric
except the skipped ones. Spache is opt-in and only runs in the first mode.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, FrozenSet, Mapping, Optional, Union

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

TRUTHY_STRINGS = {"true", "1", "yes", "on"}


def coerce_flag(value: Any) -> bool:
    """Read an option value as a flag. Anything unrecognized is False."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY_STRINGS
    if isinstance(value, (int, float)):
        return value == 1
    return False


class ReadabilityOptions(BaseModel):
    """Optional flags controlling which metrics and word lists are produced."""

    # Include the polysyllabic, unfamiliar and difficult word lists in the result
    difficult_words: bool = Field(False, alias="difficultWords")
    # Treat any word starting with a capital letter as a familiar proper noun
    caps_as_names: bool = Field(False, alias="capsAsNames")

    # Use one of these to exclude all other metrics
    only_spache: bool = Field(False, alias="onlySpache")
    only_dale_chall: bool = Field(False, alias="onlyDaleChall")
    only_ari: bool = Field(False, alias="onlyARI")
    only_coleman_liau: bool = Field(False, alias="onlyColemanLiau")
    only_flesch_kincaid: bool = Field(False, alias="onlyFleschKincaid")
    only_smog: bool = Field(False, alias="onlySMOG")
    only_gunning_fog: bool = Field(False, alias="onlyGunningFog")

    # Or any of these to exclude one at a time. Spache is excluded by default
    # as Dale-Chall is better for anything 4th grade or higher.
    skip_dale_chall: bool = Field(False, alias="skipDaleChall")
    skip_ari: bool = Field(False, alias="skipARI")
    skip_coleman_liau: bool = Field(False, alias="skipColemanLiau")
    skip_flesch_kincaid: bool = Field(False, alias="skipFleschKincaid")
    skip_smog: bool = Field(False, alias="skipSMOG")
    skip_gunning_fog: bool = Field(False, alias="skipGunningFog")

    class Config:
        populate_by_name = True
        frozen = True

    @field_validator("*", mode="before")
    @classmethod
    def _coerce(cls, value: Any) -> bool:
        return coerce_flag(value)


DEFAULT_OPTIONS = ReadabilityOptions()

OptionsInput = Union[ReadabilityOptions, Mapping[str, Any], None]


class Metric(Enum):
    """Readability metrics, declared in "only" priority order."""

    SPACHE = "spache"
    DALE_CHALL = "dale_chall"
    ARI = "ari"
    COLEMAN_LIAU = "coleman_liau"
    FLESCH_KINCAID = "flesch_kincaid"
    SMOG = "smog"
    GUNNING_FOG = "gunning_fog"

    @property
    def only_option(self) -> str:
        return f"only_{self.value}"

    @property
    def skip_option(self) -> Optional[str]:
        # Spache is never enabled by default, so it has nothing to skip
        if self is Metric.SPACHE:
            return None
        return f"skip_{self.value}"


@dataclass(frozen=True)
class OnlyMetric:
    """Selection mode: exactly one metric."""

    metric: Metric


@dataclass(frozen=True)
class AllExceptSkipped:
    """Selection mode: every default metric not skipped."""

    skipped: FrozenSet[Metric] = frozenset()


MetricSelection = Union[OnlyMetric, AllExceptSkipped]


@dataclass(frozen=True)
class InternalConfig:
    """Fully resolved flags for one scoring call."""

    difficult_words: bool = False
    caps_as_names: bool = False
    spache: bool = False
    dale_chall: bool = False
    ari: bool = False
    coleman_liau: bool = False
    flesch_kincaid: bool = False
    smog: bool = False
    gunning_fog: bool = False

    def is_enabled(self, metric: Metric) -> bool:
        return getattr(self, metric.value)

    @property
    def enabled_metrics(self) -> FrozenSet[Metric]:
        return frozenset(m for m in Metric if self.is_enabled(m))


def coerce_options(options: OptionsInput) -> Optional[ReadabilityOptions]:
    """Turn user input into options, treating anything unusable as absent."""
    if options is None or isinstance(options, ReadabilityOptions):
        return options
    if isinstance(options, Mapping):
        return ReadabilityOptions.model_validate(dict(options))

    logger.debug(f"Ignoring options of type {type(options).__name__}")
    return None


def select_metrics(options: OptionsInput) -> MetricSelection:
    """Pick the metric selection mode for a set of options."""
    options = coerce_options(options)
    if options is None:
        return AllExceptSkipped()

    for metric in Metric:
        if getattr(options, metric.only_option):
            return OnlyMetric(metric)

    return AllExceptSkipped(frozenset(
        metric for metric in Metric
        if metric.skip_option and getattr(options, metric.skip_option)
    ))


def resolve_config(options: OptionsInput = None) -> InternalConfig:
    """
    Expand user options into the internal configuration.

    Args:
        options: Sparse options, a mapping of option names, or None for defaults

    Returns:
        InternalConfig with exactly the requested metrics enabled
    """
    options = coerce_options(options)
    selection = select_metrics(options)

    if isinstance(selection, OnlyMetric):
        enabled = {selection.metric}
    else:
        enabled = {m for m in Metric if m is not Metric.SPACHE and m not in selection.skipped}

    config = InternalConfig(
        difficult_words=options is not None and options.difficult_words,
        caps_as_names=options is not None and options.caps_as_names,
        **{metric.value: metric in enabled for metric in Metric}
    )

    logger.debug(f"Resolved readability config: {config}")
    return config
