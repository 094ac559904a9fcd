"""
Service layer: business operations composed from repositories.
"""
