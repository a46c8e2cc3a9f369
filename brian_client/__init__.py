"""Integration-test client for the project-brian CSDB conversion service."""

__version__ = "0.1.0"
