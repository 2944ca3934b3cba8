from .bus_trip_id import BusTripId as BusTripId
from .price import Price as Price
from .seat_capacity import SeatCapacity as SeatCapacity
