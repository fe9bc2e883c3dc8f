"""
Infrastructure layer: process spawning, settings and history files.
"""
