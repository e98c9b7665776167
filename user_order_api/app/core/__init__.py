"""
Infrastructure shared by both services: settings, logging, the record
store and its lock, CORS and error handling.
"""
