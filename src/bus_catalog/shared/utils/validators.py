from decimal import Decimal


def to_decimal_text(v: object) -> object:
    """数値を十進数の文字列表現に変換する

    Pydantic の field_validator (mode="before") から呼び出すことを想定。
    JSON の数値で渡された金額を文字列として扱えるようにする。
    文字列やその他の型はそのまま返し、型検証は Pydantic に任せる。
    """
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float, Decimal)):
        return str(v)
    return v
