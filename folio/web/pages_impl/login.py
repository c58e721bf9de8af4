import streamlit as st

from folio.app.context import AppContext
from folio.web.framework.navigation import go_to
from folio.web.router import DASHBOARD_PATH


def render(ctx: AppContext) -> None:
    _, center, _ = st.columns([1, 2, 1])
    with center:
        with st.container(border=True):
            st.markdown("## 🔒 Admin Access")
            st.caption("Enter your password to access the dashboard")
            with st.form("login_form"):
                password = st.text_input("Password", type="password", placeholder="Enter password")
                submitted = st.form_submit_button("Login", type="primary", width="stretch")
            if submitted:
                if ctx.session.login(password):
                    go_to(DASHBOARD_PATH)
            if ctx.session.failed_attempt:
                st.error("Invalid password")
            st.caption("Hint: the demo password is set in config/folio.yaml")
