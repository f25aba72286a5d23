# config.py
from dataclasses import dataclass
from typing import Dict, Tuple

DOMAIN = "https://yce.perfectcorp.com"

CONFIG_ENDPOINT = "https://yce.perfectcorp.com/service/V2/config/get-setting"
FETCH_TIMEOUT_SECONDS = None  # seconds; None waits indefinitely
LOG_LEVEL = "INFO"

DEFAULT_PROMPT_MAX_LENGTH = 600


@dataclass(frozen=True)
class FeatureDescriptor:
    key: str
    label: str
    path: str
    type: str  # "t2i", "i2v", "t2v"


FEATURES: Dict[str, FeatureDescriptor] = {
    "t2i-prod": FeatureDescriptor(
        key="t2i-prod",
        label="Text to Image",
        path="ai-art-generator/result-photo",
        type="t2i",
    ),
    "i2v-prod": FeatureDescriptor(
        key="i2v-prod",
        label="Image to Video",
        path="ai-video-generator/result-photo",
        type="i2v",
    ),
    "t2v-prod": FeatureDescriptor(
        key="t2v-prod",
        label="Text to Video",
        path="products/ai-text-to-video-generator/result-photo",
        type="t2v",
    ),
}

# English maps to "" so the URL never gets a doubled slash
LANGUAGE_PREFIXES: Dict[str, str] = {
    "English": "",
    "Deutsch": "/de",
    "Español": "/es",
    "French": "/fr",
    "Italian": "/it",
    "日本語": "/ja",
    "Portuguese": "/pt",
    "한국어": "/ko",
    "繁體中文": "/zh-tw",
}

DEFAULT_FEATURE = "t2i-prod"
DEFAULT_LANGUAGE = "English"
DEFAULT_MODEL = "gemini-3-pro-image-preview"
DEFAULT_RATIO = "1:1"

# Fixed query parameters sent with every configuration request
REQUEST_PARAMS: Dict[str, str] = {
    "locale": "en_US",
    "platform": "web",
    "product": "yce",
    "version": "1.0",
}

# Aggregate field -> ``type`` query value of the remote document
DOCUMENT_TYPES: Dict[str, str] = {
    "t2i": "advance_setting",
    "i2v": "i2v_model",
    "t2v": "t2v_model",
    "vendor": "vendor",
}

# Where each feature document keeps its model list
MODEL_LIST_PATHS: Dict[str, Tuple[str, ...]] = {
    "t2i": ("result", "text_to_image", "models"),
    "i2v": ("result", "models"),
    "t2v": ("result", "text_to_video", "models"),
}

TRANSLATIONS_PATH: Tuple[str, ...] = ("result", "translations")
VENDORS_PATH: Tuple[str, ...] = ("result", "vendors")
VENDOR_MODEL_LISTS: Tuple[str, ...] = ("image_generation_models", "image_to_image_models")

ENGLISH_LOCALES: Tuple[str, ...] = ("en", "en_US", "en-US")
SYNTHESIZED_KEY_SUFFIX = "_name"

# Ratio option identifiers: "value" in the image shape, "id" in the video shape
RATIO_ID_FIELDS: Tuple[str, ...] = ("value", "id")
