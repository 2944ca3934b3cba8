from .bus_trip import BusTrip as BusTrip
