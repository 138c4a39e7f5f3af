"""
Generic utility functions shared across modules.

Currently only logging setup.
"""
