"""Blog post management: list, create, edit, delete.

Only routed when ``enable_post_manager`` is switched on in the config.
"""
from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional

import streamlit as st

from folio.app.context import AppContext
from folio.domain.models import Post
from folio.domain.rules import add_item, new_post_draft, parse_tags, remove_item, replace_item
from folio.infra.exceptions import FolioException
from folio.web.framework.confirm import confirmation_prompt, is_pending, request_confirmation

EDITING_KEY = "post_editing"  # (is_new, Post) while the editor is open
DELETE_TARGET_KEY = "post_delete_target"


def save_post(ctx: AppContext, post: Post, is_new: bool) -> None:
    posts = ctx.store.read().posts
    updated = add_item(posts, post) if is_new else replace_item(posts, post)
    ctx.store.update({"posts": updated})


def delete_post(ctx: AppContext, post_id: str) -> None:
    ctx.store.update({"posts": remove_item(ctx.store.read().posts, post_id)})


def _render_editor(ctx: AppContext, is_new: bool, draft: Post) -> None:
    st.title("New Post" if is_new else "Edit Post")
    with st.form("post_editor"):
        title = st.text_input("Title", draft.title)
        excerpt = st.text_area("Excerpt", draft.excerpt, height=80)
        content = st.text_area("Content", draft.content, height=260)
        cover_image = st.text_input("Cover Image URL", draft.cover_image)
        tags = st.text_input("Tags (comma separated)", ", ".join(draft.tags))
        c1, c2 = st.columns(2)
        cancelled = c1.form_submit_button("Cancel", width="stretch")
        saved = c2.form_submit_button("Save Post", type="primary", width="stretch")

    if cancelled:
        st.session_state.pop(EDITING_KEY, None)
        st.rerun()
    if saved:
        post = replace(
            draft, title=title, excerpt=excerpt, content=content, cover_image=cover_image, tags=parse_tags(tags)
        )
        try:
            save_post(ctx, post, is_new)
        except FolioException as e:
            st.error(f"保存失败: {e.message}")
            return
        st.session_state.pop(EDITING_KEY, None)
        st.rerun()


def _render_list(ctx: AppContext) -> None:
    state = ctx.store.read()
    head, action = st.columns([4, 1])
    head.title("Blog Posts")
    if action.button("➕ Create Post", type="primary", width="stretch"):
        st.session_state[EDITING_KEY] = (True, new_post_draft(state, datetime.now()))
        st.rerun()

    if is_pending("delete_post"):
        target: Optional[str] = st.session_state.get(DELETE_TARGET_KEY)
        if confirmation_prompt("delete_post", "Delete this post?") and target:
            try:
                delete_post(ctx, target)
            except FolioException as e:
                st.error(f"删除失败: {e.message}")
            else:
                st.session_state.pop(DELETE_TARGET_KEY, None)
                st.rerun()

    if not state.posts:
        st.info("No posts found.")
        return

    for post in state.posts:
        with st.container(border=True):
            info, edit_col, delete_col = st.columns([6, 1, 1])
            info.markdown(f"**{post.title}**")
            info.caption(post.date)
            if edit_col.button("✏️", key=f"edit_{post.id}", help="Edit"):
                st.session_state[EDITING_KEY] = (False, post)
                st.rerun()
            if delete_col.button("🗑️", key=f"delete_{post.id}", help="Delete"):
                st.session_state[DELETE_TARGET_KEY] = post.id
                request_confirmation("delete_post")
                st.rerun()


def render(ctx: AppContext) -> None:
    editing = st.session_state.get(EDITING_KEY)
    if editing:
        is_new, draft = editing
        _render_editor(ctx, is_new, draft)
    else:
        _render_list(ctx)
