from .exceptions import InvalidPriceFormat as InvalidPriceFormat
from .exceptions import InvalidSeatCapacity as InvalidSeatCapacity
from .exceptions import (
    SeatInitializationFailedException as SeatInitializationFailedException,
)
