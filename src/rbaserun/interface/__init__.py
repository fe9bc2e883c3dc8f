"""
Interface layer for rbaserun.
"""
