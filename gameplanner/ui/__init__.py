"""
User interface package for the Game Planner.

This package contains the Flask web API.
"""
from .web_app import create_app, run_web_app

__all__ = ["create_app", "run_web_app"]
