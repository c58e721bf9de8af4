from html import escape

import streamlit as st

from folio.app.context import AppContext


def render(ctx: AppContext) -> None:
    posts = ctx.store.read().posts
    st.title("Articles & Updates")
    if not posts:
        st.info("No posts yet.")
        return
    cols = st.columns(3)
    for i, post in enumerate(posts):
        with cols[i % 3].container(border=True):
            if post.cover_image:
                st.image(post.cover_image, width="stretch")
            if post.tags:
                st.markdown(
                    "".join(f'<span class="folio-tag">{escape(tag)}</span>' for tag in post.tags),
                    unsafe_allow_html=True,
                )
            st.markdown(f"#### {post.title}")
            st.write(post.excerpt)
            with st.expander("Read more"):
                st.write(post.content)
            st.caption(f"{post.date} · {post.author}")
