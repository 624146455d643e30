"""
Per-request records, sample series and metrics export.
"""
