"""
API router package for the log viewer service.
"""
