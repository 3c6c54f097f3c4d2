#!/usr/bin/env python3
"""
Main entry point for the Game Planner web application.

This script launches the Flask-based web server.
"""
import logging
import sys
import os

# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from gameplanner.ui.web_app import run_web_app

if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    squads_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), "squads")
    run_web_app(squads_dir=squads_dir)
