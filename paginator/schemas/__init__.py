"""Pydantic schemas package.

Folder intent:
  common.py  — HealthResponse

The paged envelope itself lives in paginator/core/response.py.
"""
