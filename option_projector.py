# option_projector.py
import locale
import unicodedata
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from config import FEATURES, MODEL_LIST_PATHS, RATIO_ID_FIELDS, FeatureDescriptor
from config_client import ConfigAggregate
from label_resolver import LookupMaps, model_id_of, resolve_label
from settings import DEFAULT_PROMPT_MAX_LENGTH
from utils import as_list, build_model_key_map, dig, non_empty_str, translations_of


@dataclass(frozen=True)
class ResolvedModelOption:
    value: str
    label: str
    record: Mapping[str, Any] = field(compare=False, repr=False)


@dataclass(frozen=True)
class ProjectionResult:
    model_options: Tuple[ResolvedModelOption, ...] = ()
    active_model: Optional[str] = None
    active_record: Optional[Mapping[str, Any]] = field(default=None, compare=False, repr=False)
    ratio_options: Tuple[str, ...] = ()
    ratio_disabled: bool = True
    prompt_max_length: int = DEFAULT_PROMPT_MAX_LENGTH

    @property
    def model_values(self) -> List[str]:
        return [option.value for option in self.model_options]


def _document_for(feature_type: str, aggregate: ConfigAggregate) -> Any:
    return getattr(aggregate, feature_type, None)


def lookup_maps_for(feature_type: str, aggregate: ConfigAggregate) -> LookupMaps:
    if feature_type == "t2i":
        return LookupMaps(
            model_keys=build_model_key_map(aggregate.vendor),
            vendor=translations_of(aggregate.vendor),
        )
    return LookupMaps(own=translations_of(_document_for(feature_type, aggregate)))


def collation_key(label: str) -> Tuple[str, str]:
    """
    Sort key comparing labels the way a locale collation does: accents and
    case only break ties between otherwise equal labels.
    """
    decomposed = unicodedata.normalize("NFKD", label.casefold())
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return locale.strxfrm(base), label


def resolve_model_options(
    feature_type: str, aggregate: ConfigAggregate
) -> Tuple[ResolvedModelOption, ...]:
    """Label every raw record of the feature, drop the rejected ones, sort by label."""
    path = MODEL_LIST_PATHS.get(feature_type)
    if path is None:
        return ()
    records = as_list(dig(_document_for(feature_type, aggregate), path))
    maps = lookup_maps_for(feature_type, aggregate)

    options: List[ResolvedModelOption] = []
    for record in records:
        result = resolve_label(record, feature_type, maps)
        if not result.keep:
            continue
        options.append(
            ResolvedModelOption(value=model_id_of(record), label=result.label, record=record)
        )

    options.sort(key=lambda option: collation_key(option.label), reverse=True)
    return tuple(options)


def prompt_max_length_for(feature_type: str, record: Optional[Mapping[str, Any]]) -> int:
    if feature_type == "t2i":
        return DEFAULT_PROMPT_MAX_LENGTH
    length = dig(record, ("prompt", "length"))
    if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
        return DEFAULT_PROMPT_MAX_LENGTH
    return length


def ratio_config_for(feature_type: str, record: Optional[Mapping[str, Any]]) -> Any:
    if not isinstance(record, Mapping):
        return None
    if feature_type == "t2i":
        for setting in as_list(record.get("advance_settings")):
            if isinstance(setting, Mapping) and isinstance(setting.get("aspect_ratio"), Mapping):
                return setting["aspect_ratio"]
        return None
    if feature_type == "t2v":
        return record.get("aspect_ratio")
    # image-to-video pages never take a ratio
    return None


def _ratio_id(option: Any) -> Optional[str]:
    if isinstance(option, str):
        return non_empty_str(option)
    if not isinstance(option, Mapping):
        return None
    for field_name in RATIO_ID_FIELDS:
        value = non_empty_str(option.get(field_name))
        if value:
            return value
    return None


def ratio_options_from(ratio_config: Any) -> Tuple[str, ...]:
    options = as_list(dig(ratio_config, ("options",)))
    ids = (_ratio_id(option) for option in options)
    return tuple(ratio_id for ratio_id in ids if ratio_id)


def project_options(
    feature: FeatureDescriptor,
    aggregate: ConfigAggregate,
    current_model: Optional[str],
) -> ProjectionResult:
    """
    Derive everything the form needs for ``feature`` from the fetched
    configuration: the sorted model options, the active model (the current
    one if still offered, else the first option), its ratio options and the
    prompt length limit. Missing data yields empty options, a disabled ratio
    and the default prompt limit.
    """
    model_options = resolve_model_options(feature.type, aggregate)

    active: Optional[ResolvedModelOption] = None
    for option in model_options:
        if option.value == current_model:
            active = option
            break
    if active is None and model_options:
        active = model_options[0]

    record = active.record if active else None
    ratio_options = ratio_options_from(ratio_config_for(feature.type, record))

    return ProjectionResult(
        model_options=model_options,
        active_model=active.value if active else None,
        active_record=record,
        ratio_options=ratio_options,
        ratio_disabled=not ratio_options,
        prompt_max_length=prompt_max_length_for(feature.type, record),
    )


def project_for_key(
    feature_key: str, aggregate: ConfigAggregate, current_model: Optional[str]
) -> ProjectionResult:
    return project_options(FEATURES[feature_key], aggregate, current_model)


def model_labels(projection: ProjectionResult) -> Dict[str, str]:
    return {option.value: option.label for option in projection.model_options}
