"""
meetingfinder - find meeting windows within a single day.
"""

__version__ = "0.1.0"
