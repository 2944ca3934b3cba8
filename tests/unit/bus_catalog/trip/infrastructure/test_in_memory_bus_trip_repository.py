from bus_catalog.trip.domain.enum import SearchableField
from bus_catalog.trip.domain.value_object import BusTripId


class TestInMemoryBusTripRepository:
    def test_save_assigns_sequential_ids(self, in_memory_repository, create_bus_trip):
        first = in_memory_repository.save(create_bus_trip())
        second = in_memory_repository.save(create_bus_trip())

        assert first.id == BusTripId(value=1)
        assert second.id == BusTripId(value=2)

    def test_save_existing_trip_replaces_record_in_place(
        self, in_memory_repository, create_bus_trip
    ):
        first = in_memory_repository.save(create_bus_trip(name="Alpha"))
        in_memory_repository.save(create_bus_trip(name="Bravo"))

        replacement = create_bus_trip(trip_id=first.id.value, name="Alpha Prime")
        in_memory_repository.save(replacement)

        names = [trip.name for trip in in_memory_repository.find_all()]
        assert names == ["Alpha Prime", "Bravo"]

    def test_find_by_id(self, in_memory_repository, create_bus_trip):
        trip = in_memory_repository.save(create_bus_trip())

        assert in_memory_repository.find_by_id(trip.id) is trip
        assert in_memory_repository.find_by_id(BusTripId(value=2)) is None

    def test_find_by_field_containing(self, in_memory_repository, create_bus_trip):
        in_memory_repository.save(create_bus_trip(name="Express 21", route="A-B"))
        in_memory_repository.save(create_bus_trip(name="Night Owl", route="B-C"))

        by_name = in_memory_repository.find_by_field_containing(
            SearchableField.NAME, "OWL"
        )
        by_route = in_memory_repository.find_by_field_containing(
            SearchableField.ROUTE, "b"
        )

        assert [trip.name for trip in by_name] == ["Night Owl"]
        assert [trip.name for trip in by_route] == ["Express 21", "Night Owl"]
