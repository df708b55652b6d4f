"""
Core infrastructure for CardFilter: configuration and error handling.
"""
