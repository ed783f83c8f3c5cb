# ORM Models
from app.models.hotel import Hotel

__all__ = ['Hotel']
