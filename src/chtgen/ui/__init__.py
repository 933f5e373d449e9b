"""Gradio user interface for CHT-Gen."""
