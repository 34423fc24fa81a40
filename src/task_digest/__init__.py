"""Todoist task digest for Slack with interactive comments."""

__version__ = "0.1.0"
