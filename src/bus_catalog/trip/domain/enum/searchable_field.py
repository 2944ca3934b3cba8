from enum import Enum


class SearchableField(str, Enum):
    """部分一致検索の対象フィールド"""

    NAME = "name"
    ROUTE = "route"
