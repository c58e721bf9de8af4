import altair as alt
import pandas as pd
import streamlit as st

from folio.app.context import AppContext
from folio.domain.rules import FOCUS_BREAKDOWN

FOCUS_COLORS = ["#2563eb", "#3b82f6", "#60a5fa", "#93c5fd"]


def focus_chart(data) -> alt.Chart:
    """Donut chart over ``{name, value}`` pairs."""
    df = pd.DataFrame(list(data))
    return (
        alt.Chart(df)
        .mark_arc(innerRadius=60, outerRadius=80)
        .encode(
            theta=alt.Theta("value:Q"),
            color=alt.Color(
                "name:N",
                sort=list(df["name"]),
                scale=alt.Scale(range=FOCUS_COLORS),
                legend=alt.Legend(orient="bottom", title=None),
            ),
            tooltip=["name:N", "value:Q"],
        )
        .properties(height=260)
    )


def render(ctx: AppContext) -> None:
    state = ctx.store.read()
    st.title("About Me")

    text_col, chart_col = st.columns([2, 1], gap="large")
    with text_col:
        st.markdown(f"**{state.profile.about}**")
    with chart_col:
        st.caption("PROFESSIONAL FOCUS")
        st.altair_chart(focus_chart(FOCUS_BREAKDOWN), width="stretch")

    exp_tab, edu_tab, pub_tab = st.tabs(["Experience", "Education", "Publications"])

    with exp_tab:
        for job in state.experience:
            with st.container(border=True):
                head, badge = st.columns([4, 1])
                head.markdown(f"### {job.role}")
                badge.caption(job.duration)
                st.markdown(f"*{job.organization}*")
                st.markdown("\n".join(f"- {line}" for line in job.description))

    with edu_tab:
        cols = st.columns(2)
        for i, edu in enumerate(state.education):
            with cols[i % 2].container(border=True):
                st.markdown(f"**{edu.degree}** · `{edu.year}`")
                st.write(edu.institution)
                if edu.grade:
                    st.caption(f"Grade/Marks: {edu.grade}")

    with pub_tab:
        for pub in state.publications:
            with st.container(border=True):
                title = f'"{pub.title}"'
                st.markdown(f"[{title}]({pub.link})" if pub.link else title)
                st.caption(pub.authors)
                st.caption(f"**{pub.year}** • {pub.venue}")
