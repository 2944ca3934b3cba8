import os

import boto3
from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Key

from bus_catalog.trip.domain.entity import BusTrip
from bus_catalog.trip.domain.service import SeatInitializer

logger = Logger(child=True)

SEAT_AVAILABLE = "AVAILABLE"
SEAT_UNAVAILABLE = "UNAVAILABLE"


class DynamoDBSeatInitializer(SeatInitializer):
    """便と同じパーティションに座席アイテムを書き込む SeatInitializer の具象実装

    座席番号 1..総座席数 のうち、先頭から空席数分を AVAILABLE、
    残りを UNAVAILABLE として登録する。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def initialize(self, trip: BusTrip) -> None:
        """座席が未作成の場合のみ座席アイテムを作成する"""
        if trip.id is None:
            raise ValueError("Cannot initialize seats for an unsaved trip")

        if self._has_seats(trip):
            logger.info("Seats already initialized", extra={"trip_id": str(trip.id)})
            return

        logger.info(
            "Initializing seats",
            extra={"trip_id": str(trip.id), "total_seats": trip.total_seats},
        )

        with self.table.batch_writer() as batch:
            for seat_number in range(1, trip.total_seats + 1):
                batch.put_item(Item=self._to_seat_item(trip, seat_number))

    def _has_seats(self, trip: BusTrip) -> bool:
        response = self.table.query(
            KeyConditionExpression=Key("PK").eq(f"BUS_TRIP#{trip.id}")
            & Key("SK").begins_with("SEAT#"),
            Limit=1,
            ConsistentRead=True,
        )
        return bool(response.get("Items"))

    def _to_seat_item(self, trip: BusTrip, seat_number: int) -> dict:
        status = (
            SEAT_AVAILABLE if seat_number <= trip.available_seats else SEAT_UNAVAILABLE
        )
        return {
            "PK": f"BUS_TRIP#{trip.id}",
            "SK": f"SEAT#{seat_number:03d}",
            "entity_type": "SEAT",
            "trip_id": trip.id.value,
            "seat_number": seat_number,
            "status": status,
        }
