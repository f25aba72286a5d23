# url_builder.py
from urllib.parse import quote

from config import DOMAIN, FEATURES, LANGUAGE_PREFIXES

# Characters left alone by JavaScript's encodeURIComponent
_UNRESERVED = "-_.!~*'()"


def encode_component(text: str) -> str:
    return quote(text, safe=_UNRESERVED)


def language_prefix(language: str) -> str:
    return LANGUAGE_PREFIXES.get(language, "")


def build_url(
    feature: str,
    language: str,
    model: str,
    ratio: str,
    ratio_disabled: bool,
    prompt: str,
    style: str = "",
) -> str:
    """
    Assemble the product deep link.

    Parameter order is fixed: model, ratio, prompt, style. ``ratio`` is
    omitted when disabled or empty and ``style`` when empty. Model and
    ratio go out raw; prompt and style are percent-encoded.
    """
    url = f"{DOMAIN}{language_prefix(language)}/{FEATURES[feature].path}"
    url += f"?model={model}"
    if not ratio_disabled and ratio:
        url += f"&ratio={ratio}"
    url += f"&prompt={encode_component(prompt)}"
    if style:
        url += f"&style={encode_component(style)}"
    return url


def build_url_from_state(state) -> str:
    """Assemble the URL for a ``selection_state.BuilderState``."""
    selection = state.selection
    return build_url(
        feature=selection.feature,
        language=selection.language,
        model=selection.model,
        ratio=selection.ratio,
        ratio_disabled=state.projection.ratio_disabled,
        prompt=selection.prompt,
        style=selection.style,
    )
