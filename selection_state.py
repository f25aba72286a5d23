"""Form selections as an immutable value plus a pure reducer.

Every event goes through ``reduce``, which applies the change and then
reconciles the model and ratio against a fresh projection, so the state
always points at values the current catalog actually offers.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple, Union

from config import (
    DEFAULT_FEATURE,
    DEFAULT_LANGUAGE,
    DEFAULT_MODEL,
    DEFAULT_RATIO,
    FEATURES,
)
from config_client import ConfigAggregate
from logging_utils import get_logger
from option_projector import ProjectionResult, project_for_key

logger = get_logger("selection_state")


@dataclass(frozen=True)
class SelectionState:
    feature: str = DEFAULT_FEATURE
    language: str = DEFAULT_LANGUAGE
    model: str = DEFAULT_MODEL
    ratio: str = DEFAULT_RATIO
    prompt: str = ""
    style: str = ""


@dataclass(frozen=True)
class BuilderState:
    selection: SelectionState = field(default_factory=SelectionState)
    config: ConfigAggregate = field(default_factory=ConfigAggregate)
    projection: ProjectionResult = field(default_factory=ProjectionResult)


@dataclass(frozen=True)
class FeatureChanged:
    feature: str


@dataclass(frozen=True)
class LanguageChanged:
    language: str


@dataclass(frozen=True)
class ModelChanged:
    model: str


@dataclass(frozen=True)
class RatioChanged:
    ratio: str


@dataclass(frozen=True)
class PromptChanged:
    prompt: str


@dataclass(frozen=True)
class StyleChanged:
    style: str


@dataclass(frozen=True)
class ConfigLoaded:
    config: ConfigAggregate


@dataclass(frozen=True)
class Reset:
    pass


Event = Union[
    FeatureChanged,
    LanguageChanged,
    ModelChanged,
    RatioChanged,
    PromptChanged,
    StyleChanged,
    ConfigLoaded,
    Reset,
]


def reconcile(
    selection: SelectionState, config: ConfigAggregate
) -> Tuple[SelectionState, ProjectionResult]:
    """
    Correct ``model`` and ``ratio`` to values valid under the latest
    projection. Running it on an already valid selection changes nothing.
    """
    projection = project_for_key(selection.feature, config, selection.model)
    corrected = selection

    if projection.model_options and corrected.model not in projection.model_values:
        logger.debug(
            "model_corrected",
            feature=selection.feature,
            previous=corrected.model,
            model=projection.active_model,
        )
        corrected = replace(corrected, model=projection.active_model)

    if not projection.ratio_disabled and corrected.ratio not in projection.ratio_options:
        logger.debug(
            "ratio_corrected",
            model=corrected.model,
            previous=corrected.ratio,
            ratio=projection.ratio_options[0],
        )
        corrected = replace(corrected, ratio=projection.ratio_options[0])

    return corrected, projection


def _apply(state: BuilderState, event: Event) -> BuilderState:
    selection = state.selection

    if isinstance(event, FeatureChanged):
        if event.feature not in FEATURES:
            return state
        return replace(state, selection=replace(selection, feature=event.feature))
    if isinstance(event, LanguageChanged):
        return replace(state, selection=replace(selection, language=event.language))
    if isinstance(event, ModelChanged):
        return replace(state, selection=replace(selection, model=event.model))
    if isinstance(event, RatioChanged):
        return replace(state, selection=replace(selection, ratio=event.ratio))
    if isinstance(event, PromptChanged):
        prompt = event.prompt[: state.projection.prompt_max_length]
        return replace(state, selection=replace(selection, prompt=prompt))
    if isinstance(event, StyleChanged):
        return replace(state, selection=replace(selection, style=event.style))
    if isinstance(event, ConfigLoaded):
        return replace(state, config=event.config)
    if isinstance(event, Reset):
        return replace(state, selection=SelectionState())
    raise TypeError(f"Unsupported event: {type(event).__name__}")


def reduce(state: BuilderState, event: Event) -> BuilderState:
    applied = _apply(state, event)
    selection, projection = reconcile(applied.selection, applied.config)
    return BuilderState(selection=selection, config=applied.config, projection=projection)


def initial_state(config: Optional[ConfigAggregate] = None) -> BuilderState:
    config = config or ConfigAggregate()
    selection, projection = reconcile(SelectionState(), config)
    return BuilderState(selection=selection, config=config, projection=projection)
