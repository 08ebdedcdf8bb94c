"""
Core utilities
Configuration, logging and exception types
"""
