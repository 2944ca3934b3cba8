from abc import ABC
from typing import Generic, TypeVar

from bus_catalog.shared.domain.exception.exceptions import (
    BusinessRuleViolationException,
)

ID = TypeVar("ID")


class Entity(ABC, Generic[ID]):
    """Entity 基底クラス

    - ID は永続化時に採番されるため、保存前は None
    - 一度設定された ID は変更できない
    """

    def __init__(self, id: ID | None = None) -> None:
        self._id = id

    @property
    def id(self) -> ID | None:
        return self._id

    @property
    def is_persisted(self) -> bool:
        return self._id is not None

    def assign_id(self, id: ID) -> None:
        """採番された ID を設定する"""
        if self._id is not None:
            raise BusinessRuleViolationException(
                f"Identity is already assigned: {self._id}"
            )
        self._id = id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return False
        if self._id is None or other._id is None:
            return self is other
        return type(self) is type(other) and self._id == other._id

    def __hash__(self) -> int:
        if self._id is None:
            return id(self)
        return hash(self._id)
