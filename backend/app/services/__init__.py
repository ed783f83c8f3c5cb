# Business Services
from app.services.validator import Validator, Validation
from app.services.hotel_store import HotelStore, SqlAlchemyHotelStore
from app.services.hotel_resource import HotelResource, ResourceResponse

__all__ = [
    'Validator', 'Validation',
    'HotelStore', 'SqlAlchemyHotelStore',
    'HotelResource', 'ResourceResponse',
]
