from .seat_initializer import SeatInitializer as SeatInitializer
