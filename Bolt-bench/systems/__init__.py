"""
Object storage systems under comparison.
"""
