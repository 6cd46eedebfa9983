"""Goal tracking: Goal Service API, client and Streamlit goal page."""

__version__ = "1.0.0"
