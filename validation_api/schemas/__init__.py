"""
Pydantic schemas for request/response contracts.
"""
