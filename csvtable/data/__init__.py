"""
The table component, its error types, line-level format helpers, and
converters to and from pandas DataFrames.
"""
