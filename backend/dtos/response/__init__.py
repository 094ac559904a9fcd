"""
Response DTOs

Shapes returned by the API; built from ORM models via from_attributes.
"""
