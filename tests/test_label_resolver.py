from label_resolver import LabelResult, LookupMaps, resolve_label

VENDOR_MAPS = LookupMaps(
    model_keys={"gemini-3-pro-image-preview": "vendor_nano_banana_pro"},
    vendor={
        "vendor_nano_banana_pro": "Nano Banana Pro",
        "record_key": "From Record",
        "gpt_image_1_name": "GPT-Image-1",
    },
)


def test_t2i_label_comes_from_vendor_model_key_first():
    record = {"model": "gemini-3-pro-image-preview", "name_key": "record_key"}

    assert resolve_label(record, "t2i", VENDOR_MAPS) == LabelResult(keep=True, label="Nano Banana Pro")


def test_t2i_falls_back_to_record_name_key():
    record = {"model": "seedream-4-0-250828", "name_key": "record_key"}

    assert resolve_label(record, "t2i", VENDOR_MAPS).label == "From Record"


def test_t2i_falls_back_to_synthesized_key():
    record = {"model": "gpt-image-1"}

    assert resolve_label(record, "t2i", VENDOR_MAPS).label == "GPT-Image-1"


def test_t2i_tries_later_candidates_when_earlier_key_misses_vendor_map():
    maps = LookupMaps(
        model_keys={"gpt-image-1": "stale_key"},
        vendor={"gpt_image_1_name": "GPT-Image-1"},
    )

    assert resolve_label({"model": "gpt-image-1", "name_key": "also_stale"}, "t2i", maps).label == "GPT-Image-1"


def test_t2i_record_is_dropped_when_every_candidate_misses():
    maps = LookupMaps(
        model_keys={"imagen-4.0-generate-001": "imagen_key"},
        vendor={"unrelated": "Unrelated"},
    )
    record = {"model": "imagen-4.0-generate-001", "name_key": "imagen_record_key"}

    result = resolve_label(record, "t2i", maps)

    assert result.keep is False
    assert result.label is None


def test_video_label_uses_own_translations():
    maps = LookupMaps(own={"i2v_kling": "Kling 2"})

    assert resolve_label({"model": "kling-v2", "name_key": "i2v_kling"}, "i2v", maps).label == "Kling 2"


def test_video_label_falls_back_to_model_id_and_is_always_kept():
    maps = LookupMaps(own={}, vendor={"veo_3_name": "Should not be used"})

    result = resolve_label({"model": "veo-3", "name_key": "missing"}, "t2v", maps)

    assert result == LabelResult(keep=True, label="veo-3")


def test_malformed_records_are_dropped():
    maps = LookupMaps()

    assert resolve_label("veo-3", "t2v", maps).keep is False
    assert resolve_label({"name_key": "x"}, "i2v", maps).keep is False
    assert resolve_label({"model": ""}, "t2i", maps).keep is False
