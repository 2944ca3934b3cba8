from .bus_trip_repository import BusTripRepository as BusTripRepository
