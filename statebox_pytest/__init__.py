"""Pytest plugin and fixtures for testing statebox stores."""
