"""Configuration for Job-Tracker."""

from job_tracker.config.settings import Settings, get_settings, reset_settings

__all__ = ["Settings", "get_settings", "reset_settings"]
