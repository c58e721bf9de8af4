"""Two-step Yes/No confirmation for destructive actions."""
from __future__ import annotations

import streamlit as st


def _pending_key(key: str) -> str:
    return f"confirm_pending_{key}"


def request_confirmation(key: str) -> None:
    st.session_state[_pending_key(key)] = True


def is_pending(key: str) -> bool:
    return bool(st.session_state.get(_pending_key(key)))


def confirmation_prompt(key: str, message: str) -> bool:
    """Show the Yes/No prompt while a confirmation is pending.

    Returns True exactly once, on the run where "Yes" was clicked.
    """
    if not is_pending(key):
        return False
    st.warning(message)
    yes_col, no_col = st.columns(2)
    if yes_col.button("Yes", key=f"{key}_yes", type="primary", width="stretch"):
        st.session_state.pop(_pending_key(key), None)
        return True
    if no_col.button("No", key=f"{key}_no", width="stretch"):
        st.session_state.pop(_pending_key(key), None)
        st.rerun()
    return False
