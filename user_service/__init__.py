"""
Random Users API - root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain logic, and infrastructure (MongoDB, random user API client).
"""
