"""
Shared utilities for samplesync.
"""
