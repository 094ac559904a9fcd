"""
Internal DTOs

Projections returned by repositories that are not full ORM entities.
"""
