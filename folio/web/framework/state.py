from __future__ import annotations

import streamlit as st

from folio.app.context import AppContext, build_context
from folio.infra.config import FolioConfig, load_config
from folio.infra.logging import LoggerManager, set_log_level

CONTEXT_KEY = "folio_context"


@st.cache_resource
def get_config() -> FolioConfig:
    """Process-wide config; also applies the logging settings once."""
    config = load_config()
    if config.log_file:
        LoggerManager.set_log_file(config.log_file)
    set_log_level(config.log_level)
    return config


def get_app_context() -> AppContext:
    """Context for the current browser session.

    Built on the first run of a session: the store restores the saved record
    and the session guard starts anonymous, so a reload always logs out.
    """
    if CONTEXT_KEY not in st.session_state:
        st.session_state[CONTEXT_KEY] = build_context(get_config())
    return st.session_state[CONTEXT_KEY]
