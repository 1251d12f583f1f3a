"""
Business logic services.

Services handle the application logic between API and database.
"""
from lifetracer.services import category_service
from lifetracer.services import event_service
from lifetracer.services import timeline_service
