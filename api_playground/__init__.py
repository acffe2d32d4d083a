"""API Playground – a Streamlit page of small public-API demos."""

__version__ = "0.1.0"
