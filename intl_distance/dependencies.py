"""
Dependency injection functions for FastAPI routes.
"""

from intl_distance.services.distance_service import DistanceService


def get_distance_service() -> DistanceService:
    """
    Dependency: Get distance service instance.

    Returns:
        DistanceService: Service using the default unit tables
    """
    return DistanceService()
