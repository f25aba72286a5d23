import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from config_client import ConfigAggregate


@pytest.fixture
def vendor_document():
    return {
        "result": {
            "vendors": [
                {
                    "name": "google",
                    "image_generation_models": [
                        {"model": "gemini-3-pro-image-preview", "name_key": "vendor_nano_banana_pro"},
                    ],
                    "image_to_image_models": [
                        {"model": "gemini-2.5-flash-image-preview", "name_key": "vendor_nano_banana"},
                    ],
                },
                {
                    "name": "shadow",
                    "image_generation_models": [
                        {"model": "gemini-3-pro-image-preview", "name_key": "vendor_shadowed"},
                    ],
                },
            ],
            "translations": [
                {"key": "vendor_nano_banana_pro", "values": {"ja": "ナノバナナ Pro", "en_US": "Nano Banana Pro"}},
                {"key": "vendor_nano_banana", "values": {"en_US": "Nano Banana"}},
                {"key": "vendor_shadowed", "values": {"en_US": "Shadowed"}},
                {"key": "gpt_image_1_name", "values": {"de": "GPT-Image-1"}},
                {"key": "flux_key", "values": {"en": "Flux 1.1 Pro"}},
            ],
        }
    }


@pytest.fixture
def t2i_document():
    return {
        "result": {
            "text_to_image": {
                "models": [
                    {
                        "model": "flux-pro-1.1",
                        "name_key": "flux_key",
                        "advance_settings": [
                            {"aspect_ratio": {"options": [{"value": "3:4"}, {"value": "4:3"}]}},
                        ],
                    },
                    {
                        "model": "gemini-3-pro-image-preview",
                        "prompt": {"length": 2000},
                        "advance_settings": [
                            {"quality": {"options": [{"value": "hd"}]}},
                            {"aspect_ratio": {"options": [{"value": "1:1"}, {"value": "16:9"}]}},
                        ],
                    },
                    {"model": "gpt-image-1", "advance_settings": [{"aspect_ratio": {"options": []}}]},
                    {"model": "gemini-2.5-flash-image-preview"},
                    {"model": "mystery-model", "name_key": "missing_key"},
                ]
            }
        }
    }


@pytest.fixture
def i2v_document():
    return {
        "result": {
            "models": [
                {"model": "kling-v2", "name_key": "i2v_kling", "prompt": {"length": 1500}},
                {"model": "veo-3", "aspect_ratio": {"options": [{"id": "16:9"}]}},
            ],
            "translations": [
                {"key": "i2v_kling", "values": {"en_US": "Kling 2"}},
            ],
        }
    }


@pytest.fixture
def t2v_document():
    return {
        "result": {
            "text_to_video": {
                "models": [
                    {
                        "model": "hailuo-02",
                        "name_key": "t2v_hailuo",
                        "aspect_ratio": {"options": []},
                        "prompt": {"length": 0},
                    },
                    {
                        "model": "veo-3-t2v",
                        "name_key": "t2v_veo",
                        "aspect_ratio": {"options": [{"id": "16:9"}, {"id": "9:16"}]},
                        "prompt": {"length": 800},
                    },
                ]
            },
            "translations": [
                {"key": "t2v_veo", "values": {"en_US": "Veo 3"}},
                {"key": "t2v_hailuo", "values": {"en_US": "Hailuo"}},
            ],
        }
    }


@pytest.fixture
def aggregate(vendor_document, t2i_document, i2v_document, t2v_document):
    return ConfigAggregate(
        t2i=t2i_document,
        i2v=i2v_document,
        t2v=t2v_document,
        vendor=vendor_document,
        loaded=True,
    )
