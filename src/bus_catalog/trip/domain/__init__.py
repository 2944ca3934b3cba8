from .entity import BusTrip as BusTrip
from .enum import SearchableField as SearchableField
from .enum import SeatState as SeatState
from .factory import BusTripFactory as BusTripFactory
from .factory import TripDetails as TripDetails
from .repository import BusTripRepository as BusTripRepository
from .service import SeatInitializer as SeatInitializer
from .value_object import BusTripId as BusTripId
from .value_object import Price as Price
from .value_object import SeatCapacity as SeatCapacity
