"""
Word dataset: filtering, pagination, validation, persistence and the
version-agnostic service used by the v1 and v2 routers.
"""
