# wordfilter/core/__init__.py

"""Core domain models and utilities used across the filter.

This package provides domain types, exceptions, and resource loaders
shared by the rest of the application.
"""
