from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Repository 基底クラス

    - 集約の永続化を抽象化する
    - ID の採番は永続化層の責務
    """

    @abstractmethod
    def save(self, aggregate: T) -> T:
        """集約を永続化し、ID 採番済みの集約を返す"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """IDで集約を検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[T]:
        """全ての集約を保存順で取得する"""
        raise NotImplementedError
