from .bus_trip_factory import BusTripFactory as BusTripFactory
from .bus_trip_factory import TripDetails as TripDetails
