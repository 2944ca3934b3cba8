from bus_catalog.trip.domain.entity import BusTrip
from bus_catalog.trip.domain.enum import SearchableField
from bus_catalog.trip.domain.repository import BusTripRepository


class SearchTripsService:
    """便名・路線による便検索のユースケース

    - None と空文字は「指定なし」として扱う（前後の空白は除去しない）
    - 両方指定時は路線で絞り込んだ結果を、便名でさらに絞り込む
    - 並び順はレポジトリが返す順序を維持する
    """

    def __init__(self, repository: BusTripRepository) -> None:
        self._repository = repository

    def search(
        self, name: str | None = None, route: str | None = None
    ) -> list[BusTrip]:
        """便名・路線の部分一致（大文字小文字を区別しない）で検索する"""
        has_name = _is_present(name)
        has_route = _is_present(route)

        if has_name and has_route:
            candidates = self._repository.find_by_field_containing(
                SearchableField.ROUTE, route
            )
            return [
                trip
                for trip in candidates
                if trip.matches(SearchableField.NAME, name)
            ]

        if has_name:
            return self._repository.find_by_field_containing(
                SearchableField.NAME, name
            )

        if has_route:
            return self._repository.find_by_field_containing(
                SearchableField.ROUTE, route
            )

        return self._repository.find_all()


def _is_present(value: str | None) -> bool:
    return value is not None and value != ""
