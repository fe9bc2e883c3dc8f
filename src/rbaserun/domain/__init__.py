"""
Domain layer for rbaserun.

Pure connection-string classification, error payloads and settings models.
"""
