"""
Study Tracker
Task tracking for study and work: task storage plus dashboard, calendar and
progress views
"""

__version__ = "0.1.0"
