"""
UI package for the Live Match Recorder.

This package contains the Flask web server that drives a match session.
"""
from .web_app import create_app, run_web_app, WebAppState

__all__ = ["create_app", "run_web_app", "WebAppState"]
