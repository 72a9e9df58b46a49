"""Shared core for the demo programs.

This package holds configuration, logging, repositories and error kinds,
isolated from the individual demos for easy testing and reasoning.
"""
