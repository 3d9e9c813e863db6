#!/usr/bin/env python3
"""
Convenience entry point for running meetingfinder directly.

Usage: python -m meetingfinder [command] [options]
"""

from .cli.app import app

if __name__ == "__main__":
    app()
