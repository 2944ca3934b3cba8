from enum import Enum


class SeatState(str, Enum):
    """座席の初期化状態"""

    PENDING = "PENDING"
    INITIALIZED = "INITIALIZED"
