"""Actual screen implementations (render functions).

Every module exposes ``render(ctx)``; the shell in ``folio.web.shell`` picks one
per request from the router's resolution.
"""
