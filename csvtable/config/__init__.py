"""
Configuration loading and validation for table defaults.

Provides a strongly typed settings object (delimiter, encoding, log level)
loaded from environment variables with upfront validation.
"""
