"""Streamlit entry point: ``streamlit run app.py``."""
from folio.web.shell import run

run()
