"""
Configuration and logging utilities.
"""
