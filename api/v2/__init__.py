"""
v2 routes (pagination envelopes, CORS on every response).
"""
