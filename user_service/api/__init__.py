"""
API layer for the user service.

Exposes HTTP endpoints for the user resource (/users) and for populating
it from the random user API (/randomUsers).
"""
