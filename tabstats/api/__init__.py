"""REST API for tabstats.

This module contains the FastAPI application exposing the analyses as
stateless JSON endpoints.
"""
