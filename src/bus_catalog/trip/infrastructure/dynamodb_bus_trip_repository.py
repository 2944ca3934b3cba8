import os
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from bus_catalog.shared.domain.exception import DuplicateResourceException
from bus_catalog.trip.domain.entity import BusTrip
from bus_catalog.trip.domain.enum import SearchableField, SeatState
from bus_catalog.trip.domain.repository import BusTripRepository
from bus_catalog.trip.domain.value_object import BusTripId, Price, SeatCapacity

ENTITY_TYPE = "BUS_TRIP"
TRIPS_PARTITION = "BUS_TRIPS"
COUNTER_KEY = {"PK": "COUNTER", "SK": "BUS_TRIP"}

# 部分一致検索用に小文字化した値を保持する属性
_LOWER_ATTRIBUTES: dict[SearchableField, str] = {
    SearchableField.NAME: "name_lower",
    SearchableField.ROUTE: "route_lower",
}


class DynamoDBBusTripRepository(BusTripRepository):
    """DynamoDBを使用したBusTripRepository の具象実装

    全ての便は GSI1 の同一パーティションに登録順のソートキーで格納する。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, trip: BusTrip) -> BusTrip:
        """便をDBに保存する"""
        if trip.id is None:
            trip.assign_id(self._next_id())
            try:
                self.table.put_item(
                    Item=self._to_item(trip),
                    ConditionExpression=Attr("PK").not_exists(),
                )
            except ClientError as e:
                if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                    raise DuplicateResourceException(
                        f"Bus trip already exists: {trip.id}"
                    ) from e
                raise
            return trip

        self.table.put_item(Item=self._to_item(trip))
        return trip

    def find_by_id(self, trip_id: BusTripId) -> BusTrip | None:
        """便IDで検索"""
        response = self.table.get_item(
            Key={"PK": f"{ENTITY_TYPE}#{trip_id}", "SK": "METADATA"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_all(self) -> list[BusTrip]:
        """全ての便を登録順で取得"""
        items = self._query_trips()
        return [self._to_entity(item) for item in items]

    def find_by_field_containing(
        self, field: SearchableField, text: str
    ) -> list[BusTrip]:
        """小文字化した属性に対する contains フィルタで検索"""
        if not text:
            return self.find_all()

        items = self._query_trips(
            FilterExpression=Attr(_LOWER_ATTRIBUTES[field]).contains(text.lower())
        )
        return [self._to_entity(item) for item in items]

    def _next_id(self) -> BusTripId:
        """アトミックカウンタで次の便IDを採番する"""
        response = self.table.update_item(
            Key=COUNTER_KEY,
            UpdateExpression="ADD #value :one",
            ExpressionAttributeNames={"#value": "current_value"},
            ExpressionAttributeValues={":one": 1},
            ReturnValues="UPDATED_NEW",
        )
        return BusTripId(value=int(response["Attributes"]["current_value"]))

    def _query_trips(self, **kwargs) -> list[dict]:
        """GSI1 を最後のページまでクエリする"""
        query_kwargs: dict = {
            "IndexName": "GSI1",
            "KeyConditionExpression": Key("GSI1PK").eq(TRIPS_PARTITION),
            **kwargs,
        }
        items: list[dict] = []

        while True:
            response = self.table.query(**query_kwargs)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return items
            query_kwargs["ExclusiveStartKey"] = last_key

    def _to_item(self, trip: BusTrip) -> dict:
        """ドメインエンティティを DynamoDB アイテムに変換する"""
        return {
            "PK": f"{ENTITY_TYPE}#{trip.id}",
            "SK": "METADATA",
            "entity_type": ENTITY_TYPE,
            "trip_id": trip.id.value,
            "name": trip.name,
            "route": trip.route,
            "name_lower": trip.name.lower(),
            "route_lower": trip.route.lower(),
            "departure_time": trip.departure_time,
            "arrival_time": trip.arrival_time,
            "available_seats": trip.available_seats,
            "total_seats": trip.total_seats,
            "price": str(trip.price.amount),
            "seat_state": trip.seat_state.value,
            "GSI1PK": TRIPS_PARTITION,
            "GSI1SK": f"{ENTITY_TYPE}#{trip.id.value:010d}",
        }

    def _to_entity(self, item: dict) -> BusTrip:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return BusTrip(
            id=BusTripId(value=int(item["trip_id"])),
            name=item["name"],
            route=item["route"],
            departure_time=item["departure_time"],
            arrival_time=item["arrival_time"],
            capacity=SeatCapacity(
                available=int(item["available_seats"]),
                total=int(item["total_seats"]),
            ),
            price=Price(amount=Decimal(item["price"])),
            seat_state=SeatState(item["seat_state"]),
        )
