"""
Configuration and the console chat session.
"""
