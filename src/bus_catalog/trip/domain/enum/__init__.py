from .searchable_field import SearchableField as SearchableField
from .seat_state import SeatState as SeatState
