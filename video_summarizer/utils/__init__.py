"""
Utility modules: logging, error types and small helpers.
"""
