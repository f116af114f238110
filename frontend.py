#!/usr/bin/env python3
"""
dBm ⇄ Watt converter — browser page.

Launch: streamlit run frontend.py
"""

import streamlit as st

# ─── Page Config ────────────────────────────────────────────────────────────
st.set_page_config(
    page_title="dBm ⇄ Watt Converter",
    page_icon="📶",
    layout="centered",
)

# ─── Imports (lazy, after page config) ──────────────────────────────────────
from rfpower import __version__
from rfpower.engine import ConverterSession
from rfpower.logging_config import setup_logging
from rfpower.utils.constants import FIELD_DBM, FIELD_WATTS
from rfpower.visualization.plotly_viz import plot_power_curve

# Widget keys double as the text of each field
WIDGET_KEYS = {
    FIELD_DBM: "dbm_input",
    FIELD_WATTS: "watts_input",
}


# ═══════════════════════════════════════════════════════════════════════════════
# Session State Initialization
# ═══════════════════════════════════════════════════════════════════════════════

def init_session():
    """One converter view-model per browser session."""
    if "converter" not in st.session_state:
        setup_logging()
        st.session_state.converter = ConverterSession()
    for key in WIDGET_KEYS.values():
        if key not in st.session_state:
            st.session_state[key] = ""
    if "copy_buffer" not in st.session_state:
        st.session_state.copy_buffer = ""

init_session()


def on_field_change(field_name):
    """Forward an edit to the view-model and mirror the other field."""
    session = st.session_state.converter
    session.on_edited(field_name, st.session_state[WIDGET_KEYS[field_name]])
    st.session_state[WIDGET_KEYS[FIELD_DBM]] = session.dbm_text
    st.session_state[WIDGET_KEYS[FIELD_WATTS]] = session.watts_text
    st.session_state.copy_buffer = ""


def on_clear():
    st.session_state.converter.on_clear()
    st.session_state.copy_buffer = ""
    for key in WIDGET_KEYS.values():
        st.session_state[key] = ""


def browser_clipboard(text):
    """Streamlit has no clipboard API; the value is shown in st.code, which has a copy button."""
    st.session_state.copy_buffer = text


def on_copy(field_name):
    session = st.session_state.converter
    message = session.copy(field_name, browser_clipboard)
    st.toast(message, icon="📋" if message != "Copy failed" else "⚠️")
    session.dismiss_feedback()


session = st.session_state.converter


# ═══════════════════════════════════════════════════════════════════════════════
# Converter Card
# ═══════════════════════════════════════════════════════════════════════════════

st.title("dBm ⇄ Watt Converter")

col_input, col_copy = st.columns([5, 1], vertical_alignment="bottom")
with col_input:
    st.text_input(
        "dBm",
        key=WIDGET_KEYS[FIELD_DBM],
        placeholder="Enter dBm value...",
        on_change=on_field_change,
        args=(FIELD_DBM,),
    )
with col_copy:
    if session.can_copy(FIELD_DBM):
        st.button("📋", key="copy_dbm", help="Copy dBm value",
                  on_click=on_copy, args=(FIELD_DBM,))

st.markdown("<div style='text-align:center;font-size:1.5em'>⇅</div>",
            unsafe_allow_html=True)

col_input, col_copy = st.columns([5, 1], vertical_alignment="bottom")
with col_input:
    st.text_input(
        "Watt (W)",
        key=WIDGET_KEYS[FIELD_WATTS],
        placeholder="Enter watt value...",
        on_change=on_field_change,
        args=(FIELD_WATTS,),
    )
with col_copy:
    if session.can_copy(FIELD_WATTS):
        st.button("📋", key="copy_watts", help="Copy Watt value",
                  on_click=on_copy, args=(FIELD_WATTS,))

if st.session_state.copy_buffer:
    st.code(st.session_state.copy_buffer, language=None)

if session.show_clear:
    st.button("Clear All", on_click=on_clear)


# ═══════════════════════════════════════════════════════════════════════════════
# Calculation Steps
# ═══════════════════════════════════════════════════════════════════════════════

derivation = session.derivation
if derivation is not None:
    st.divider()
    st.subheader("📊 Calculation Steps")
    box = st.info if session.last_modified == FIELD_DBM else st.success
    with st.container(border=True):
        st.markdown(f"**{derivation.title}**")
        st.markdown("**Formula:**")
        st.code(derivation.formula, language=None)
        for i, step in enumerate(derivation.steps, start=1):
            st.markdown(f"**Step {i}:** {step}")
        box(f"Result: {derivation.result}")

    point = session.operating_point
    if point is not None:
        dbm_value, watts_value = point
        st.plotly_chart(
            plot_power_curve(dbm_value, watts_value, session.config),
            use_container_width=True,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Footer
# ═══════════════════════════════════════════════════════════════════════════════

st.divider()
st.caption(f"dBm ⇄ Watt Converter v{__version__} — "
           "Power (W) = 10^((dBm - 30) / 10), dBm = 10 × log₁₀(Power) + 30.")
