"""Velo Builder — Streamlit dashboard.

Run with:
    streamlit run streamlit_app/app.py

Requires the ``dashboard`` extra (streamlit installed).
"""

from __future__ import annotations

import streamlit as st

from velo_builder.client import build_one, client_code, parse_steps
from velo_builder.director import Director
from velo_builder.exceptions import VeloBuilderError
from velo_builder.models.enums import PartKind
from velo_builder.registry import BuilderRegistry
from velo_builder.serialization import to_dict, to_json_string

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Velo Builder",
    page_icon="🚲",
    layout="centered",
)

MODE_LABELS = {
    "demo": "Walkthrough (all three)",
    "minimal": "Standard basic velo",
    "full": "Standard full featured velo",
    "custom": "Custom velo",
}


@st.cache_resource
def get_registry() -> BuilderRegistry:
    registry = BuilderRegistry()
    registry.discover_builders()
    return registry


def _render_velo(title: str, velo, builder_id: str) -> None:
    st.subheader(title)
    if len(velo) == 0:
        st.caption("(no parts)")
    else:
        st.markdown(" → ".join(f"`{part}`" for part in velo))
    with st.expander("JSON"):
        st.code(to_json_string(velo, builder_id), language="json")


# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------

registry = get_registry()

st.sidebar.title("Workshop")
builder_id = st.sidebar.selectbox(
    "Builder",
    registry.builder_ids,
    format_func=lambda bid: registry.get(bid).description or bid,
)
mode = st.sidebar.radio(
    "What to build",
    list(MODE_LABELS),
    format_func=MODE_LABELS.get,
)
steps_text = ""
if mode == "custom":
    picked = st.sidebar.multiselect(
        "Parts (in order)",
        [kind.name.lower() for kind in PartKind],
        default=["guidon", "roue"],
    )
    steps_text = ",".join(picked)

# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

st.title("Velo Builder")
st.caption("Assemble velos step by step with a builder and a director")

if st.button("Build", type="primary"):
    builder = registry.create(builder_id)
    try:
        if mode == "demo":
            basic, full, custom = client_code(Director(), builder, out=lambda _line: None)
            _render_velo("Standard basic velo", basic, builder_id)
            _render_velo("Standard full featured velo", full, builder_id)
            _render_velo("Custom velo", custom, builder_id)
        else:
            velo = build_one(builder, mode, parse_steps(steps_text))
            _render_velo(MODE_LABELS[mode], velo, builder_id)
            st.json(to_dict(velo, builder_id))
    except VeloBuilderError as exc:
        st.error(str(exc))
