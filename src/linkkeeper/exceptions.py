"""Centralized exceptions for the linkkeeper application."""


class LinkkeeperError(Exception):
    """Base exception for all linkkeeper errors."""
