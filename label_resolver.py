"""Display-label resolution for raw model records.

Text-to-image records are labelled from the shared vendor catalog. The
translation key is tried from three sources in a fixed order, and a record
whose key is missing from all three is dropped from the model list, because
the vendor gives it no human-readable name.

Video records carry their own translations. They fall back to the raw model
identifier and are never dropped.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Sequence

from config import SYNTHESIZED_KEY_SUFFIX
from utils import ModelKeyMap, TranslationMap, non_empty_str


@dataclass(frozen=True)
class LookupMaps:
    model_keys: ModelKeyMap = field(default_factory=dict)
    vendor: TranslationMap = field(default_factory=dict)
    own: TranslationMap = field(default_factory=dict)


@dataclass(frozen=True)
class LabelResult:
    keep: bool
    label: Optional[str] = None


DROP = LabelResult(keep=False)

KeyStrategy = Callable[[Mapping[str, Any], LookupMaps], Optional[str]]


def model_id_of(record: Any) -> Optional[str]:
    if not isinstance(record, Mapping):
        return None
    return non_empty_str(record.get("model"))


def key_from_vendor_map(record: Mapping[str, Any], maps: LookupMaps) -> Optional[str]:
    return maps.model_keys.get(record["model"])


def key_from_record(record: Mapping[str, Any], maps: LookupMaps) -> Optional[str]:
    return non_empty_str(record.get("name_key"))


def synthesized_key(record: Mapping[str, Any], maps: LookupMaps) -> str:
    return record["model"].replace("-", "_") + SYNTHESIZED_KEY_SUFFIX


T2I_KEY_STRATEGIES: Sequence[KeyStrategy] = (
    key_from_vendor_map,
    key_from_record,
    synthesized_key,
)


def first_translation(
    record: Mapping[str, Any],
    maps: LookupMaps,
    translations: TranslationMap,
    strategies: Sequence[KeyStrategy],
) -> Optional[str]:
    """Try each strategy's key against ``translations``; return the first hit."""
    for strategy in strategies:
        key = strategy(record, maps)
        if key and key in translations:
            return translations[key]
    return None


def resolve_label(record: Any, feature_type: str, maps: LookupMaps) -> LabelResult:
    model_id = model_id_of(record)
    if model_id is None:
        return DROP

    if feature_type == "t2i":
        label = first_translation(record, maps, maps.vendor, T2I_KEY_STRATEGIES)
        if label is None:
            return DROP
        return LabelResult(keep=True, label=label)

    label = first_translation(record, maps, maps.own, (key_from_record,))
    return LabelResult(keep=True, label=label or model_id)
