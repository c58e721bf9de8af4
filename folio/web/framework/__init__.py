"""Frontend framework layer for the Streamlit UI.

This package centralizes:
- page initialization (set_page_config + theme CSS)
- the per-session application context
- navigation and shared layout (navbar, footer, admin sidebar)
- confirmation prompts for destructive actions
"""
