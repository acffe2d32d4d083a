"""Streamlit presentation layer.

Modules here only lay out widgets and display views; validation, fetching
and rendering to view-models live in ``api_playground.features``.
"""
