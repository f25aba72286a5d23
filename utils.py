import json
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from config import ENGLISH_LOCALES, TRANSLATIONS_PATH, VENDOR_MODEL_LISTS, VENDORS_PATH

TranslationMap = Dict[str, str]
ModelKeyMap = Dict[str, str]


def safe_json_loads(raw: str) -> Any:
    """
    Safely parse JSON string. If parsing fails, try to extract the first
    top-level JSON object from the string by trimming outside text
    (e.g. a JSONP wrapper or a stray BOM from the config service).
    """
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        start = raw.find("{")
        end = raw.rfind("}")
        if start != -1 and end != -1 and end > start:
            try:
                return json.loads(raw[start : end + 1])
            except json.JSONDecodeError:
                pass
        raise


def dig(payload: Any, path: Sequence[str]) -> Any:
    """Walk nested dicts along ``path``; return None as soon as a step is missing."""
    current = payload
    for key in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current


def as_list(value: Any) -> List[Any]:
    return list(value) if isinstance(value, list) else []


def non_empty_str(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value
    return None


def pick_english(values: Any) -> Optional[str]:
    """
    Return the English value of a per-locale dict, or the first non-empty
    value of any locale when no English entry exists.
    """
    if not isinstance(values, Mapping):
        return None
    for locale in ENGLISH_LOCALES:
        text = non_empty_str(values.get(locale))
        if text:
            return text
    for text in values.values():
        if non_empty_str(text):
            return text
    return None


def build_translation_map(entries: Iterable[Any]) -> TranslationMap:
    """
    Build a key -> display string map from a translations list.

    Each entry looks like ``{"key": "...", "values": {"en_US": "...", ...}}``.
    Entries without a key or without any usable text are skipped.
    """
    translations: TranslationMap = {}
    for entry in entries:
        if not isinstance(entry, Mapping):
            continue
        key = non_empty_str(entry.get("key"))
        text = pick_english(entry.get("values"))
        if key and text:
            translations[key] = text
    return translations


def translations_of(document: Any) -> TranslationMap:
    return build_translation_map(as_list(dig(document, TRANSLATIONS_PATH)))


def build_model_key_map(vendor_document: Any) -> ModelKeyMap:
    """
    Map model identifiers to translation keys by scanning every vendor's
    image-generation and image-to-image model lists. The first mapping seen
    for an identifier wins.
    """
    model_keys: ModelKeyMap = {}
    for vendor in as_list(dig(vendor_document, VENDORS_PATH)):
        if not isinstance(vendor, Mapping):
            continue
        for list_name in VENDOR_MODEL_LISTS:
            for item in as_list(vendor.get(list_name)):
                if not isinstance(item, Mapping):
                    continue
                model_id = non_empty_str(item.get("model"))
                name_key = non_empty_str(item.get("name_key"))
                if model_id and name_key:
                    model_keys.setdefault(model_id, name_key)
    return model_keys
