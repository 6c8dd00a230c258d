from .connection import get_db
from .schema import init_db

__all__ = ["get_db", "init_db"]
