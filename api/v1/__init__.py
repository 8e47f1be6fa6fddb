"""
Legacy v1 routes (flat list responses).
"""
