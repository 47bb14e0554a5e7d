"""
Request/response schemas for the log viewer API.
"""
