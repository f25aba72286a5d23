from typing import Callable

import streamlit as st

from config import FEATURES, LANGUAGE_PREFIXES
from config_client import load_config_aggregate
from logging_utils import configure_logging, get_logger
from option_projector import model_labels
from selection_state import (
    BuilderState,
    ConfigLoaded,
    Event,
    FeatureChanged,
    LanguageChanged,
    ModelChanged,
    PromptChanged,
    RatioChanged,
    Reset,
    StyleChanged,
    initial_state,
    reduce,
)
from settings import LOG_LEVEL
from url_builder import build_url_from_state, language_prefix

st.set_page_config(
    page_title="YCO Prompt URL Builder",
    layout="wide",
)

configure_logging(LOG_LEVEL)
logger = get_logger("app")

# Widget key -> selection field it mirrors
WIDGET_FIELDS = {
    "feature_select": "feature",
    "language_select": "language",
    "model_select": "model",
    "ratio_select": "ratio",
    "prompt_input": "prompt",
    "style_input": "style",
}

st.markdown(
    """
    <style>
        .app-header h1 { margin-bottom: 0.3rem; }
        .app-header h1 span { color: #ff4785; }
        .app-header p { margin: 0; opacity: 0.75; }
    </style>
    """,
    unsafe_allow_html=True,
)


def get_state() -> BuilderState:
    return st.session_state["builder"]


def sync_widgets(state: BuilderState) -> None:
    """Push the reconciled selection back into the widget keys."""
    for widget_key, field_name in WIDGET_FIELDS.items():
        st.session_state[widget_key] = getattr(state.selection, field_name)


def dispatch(event: Event) -> None:
    state = reduce(get_state(), event)
    st.session_state["builder"] = state
    sync_widgets(state)


def on_widget_change(widget_key: str, make_event: Callable[[str], Event]) -> Callable[[], None]:
    def _callback() -> None:
        dispatch(make_event(st.session_state[widget_key]))

    return _callback


def init_session_state():
    if "builder" not in st.session_state:
        st.session_state["builder"] = initial_state()
        sync_widgets(st.session_state["builder"])


def load_catalog() -> None:
    """Fetch the remote catalogs once per session."""
    with st.spinner("Loading model catalogs..."):
        aggregate = load_config_aggregate()
    if aggregate.missing():
        logger.warning("catalog_degraded", missing=aggregate.missing())
    dispatch(ConfigLoaded(aggregate))


def render_configuration(state: BuilderState) -> None:
    selection = state.selection
    projection = state.projection

    st.header("Configuration")

    st.selectbox(
        "Feature (Target URL)",
        options=list(FEATURES),
        format_func=lambda key: FEATURES[key].label,
        key="feature_select",
        on_change=on_widget_change("feature_select", FeatureChanged),
    )
    st.caption(f".../{FEATURES[selection.feature].path}")

    st.radio(
        "Language",
        options=list(LANGUAGE_PREFIXES),
        horizontal=True,
        key="language_select",
        on_change=on_widget_change("language_select", LanguageChanged),
    )
    st.caption(f"Prefix: `{language_prefix(selection.language) or '(None)'}`")

    labels = model_labels(projection)
    st.selectbox(
        "Model",
        options=projection.model_values or [selection.model],
        format_func=lambda value: labels.get(value, value),
        key="model_select",
        disabled=not projection.model_options,
        on_change=on_widget_change("model_select", ModelChanged),
    )
    if not projection.model_options:
        st.caption("No models available for this feature.")

    st.radio(
        "Aspect Ratio",
        options=list(projection.ratio_options) or [selection.ratio],
        horizontal=True,
        key="ratio_select",
        disabled=projection.ratio_disabled,
        on_change=on_widget_change("ratio_select", RatioChanged),
    )
    if projection.ratio_disabled:
        st.warning(f"Aspect ratio is disabled for {FEATURES[selection.feature].label}.")

    limit = projection.prompt_max_length
    st.text_area(
        "Prompt",
        placeholder=f"Please input the prompt (Max: {limit} chars)",
        height=160,
        key="prompt_input",
        on_change=on_widget_change("prompt_input", PromptChanged),
    )
    count = len(selection.prompt)
    counter = f"{count} / {limit}"
    st.caption(f"**:red[{counter}]**" if count >= limit else counter)

    with st.expander("Style (optional)"):
        st.text_input(
            "Style",
            key="style_input",
            on_change=on_widget_change("style_input", StyleChanged),
        )


def render_output(state: BuilderState) -> None:
    selection = state.selection
    projection = state.projection
    final_url = build_url_from_state(state)

    st.subheader("Output URL")
    st.code(final_url, language=None, wrap_lines=True)

    col_open, col_reset = st.columns([1, 1])
    with col_open:
        st.link_button("Open Page", final_url, use_container_width=True)
    with col_reset:
        st.button(
            "Reset",
            on_click=dispatch,
            args=(Reset(),),
            use_container_width=True,
        )

    st.divider()
    st.markdown("##### Debug View")
    col_model, col_ratio = st.columns(2)
    with col_model:
        st.markdown("**model:**")
        st.code(selection.model or "(empty)", language=None)
    with col_ratio:
        st.markdown("**ratio:**")
        ratio_text = selection.ratio or "(empty)"
        st.markdown(f"~~{ratio_text}~~" if projection.ratio_disabled else f"`{ratio_text}`")
    st.markdown("**raw prompt:**")
    st.code(selection.prompt or "(empty)", language=None, wrap_lines=True)


def main():
    init_session_state()

    st.markdown(
        """
        <div class="app-header">
            <h1>YCO Prompt <span>URL Builder</span></h1>
            <p>Generate localized URLs for production features.</p>
        </div>
        """,
        unsafe_allow_html=True,
    )

    if not get_state().config.loaded:
        load_catalog()

    state = get_state()
    missing = state.config.missing()
    if missing:
        st.warning(
            "Some configuration documents could not be loaded: "
            + ", ".join(missing)
            + ". Options for the affected features may be empty."
        )

    with st.sidebar:
        render_configuration(state)

    render_output(state)


if __name__ == "__main__":
    main()
