from abc import abstractmethod

from bus_catalog.shared.domain import Repository
from bus_catalog.trip.domain.entity.bus_trip import BusTrip
from bus_catalog.trip.domain.enum import SearchableField
from bus_catalog.trip.domain.value_object import BusTripId


class BusTripRepository(Repository[BusTrip, BusTripId]):
    """バス便レポジトリのインターフェース"""

    @abstractmethod
    def save(self, trip: BusTrip) -> BusTrip:
        """便を保存する

        ID 未採番の便は新規登録として ID を採番する。
        採番済みの便はレコード全体を置き換える。
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, trip_id: BusTripId) -> BusTrip | None:
        """便IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[BusTrip]:
        """全ての便を登録順で取得する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_field_containing(
        self, field: SearchableField, text: str
    ) -> list[BusTrip]:
        """フィールドに text を含む便を登録順で取得する（大文字小文字を区別しない）"""
        raise NotImplementedError
