"""
Data Transfer Objects (DTOs) Layer

Pydantic and dataclass shapes that keep the ORM models out of the API.

Structure:
- request/: bodies and query models accepted by the API
- response/: payloads returned by the API
- internal/: projections passed between repositories and services
"""
