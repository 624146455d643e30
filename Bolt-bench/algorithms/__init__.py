"""
Benchmark phases and the operation runner they share.
"""
