# API Routers
from app.routers import hotels

__all__ = ['hotels']
