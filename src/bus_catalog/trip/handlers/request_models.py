from pydantic import BaseModel, Field, field_validator

from bus_catalog.shared.utils import to_decimal_text


class CreateTripRequest(BaseModel):
    """便登録リクエストスキーマ

    文字列項目は前後の空白を含めてそのまま保持する。
    """

    name: str = Field(
        ...,
        max_length=100,
        description="便名",
        examples=["Express 21"],
    )

    route: str = Field(
        ...,
        max_length=200,
        description="路線",
        examples=["Springfield-Capital City"],
    )

    departure_time: str = Field(
        ...,
        max_length=50,
        description="出発時刻（書式は問わない）",
        examples=["08:00"],
    )

    arrival_time: str = Field(
        ...,
        max_length=50,
        description="到着時刻（書式は問わない）",
        examples=["12:30"],
    )

    available_seats: int = Field(
        ..., ge=0, le=999, description="空席数", examples=[40]
    )

    total_seats: int = Field(
        ..., ge=0, le=999, description="総座席数", examples=[40]
    )

    price: str = Field(
        ...,
        description="料金（十進数の文字列）",
        examples=["25.50"],
    )

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_text(cls, v):
        """数値で渡された料金を文字列に変換する"""
        return to_decimal_text(v)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Express 21",
                    "route": "Springfield-Capital City",
                    "departure_time": "08:00",
                    "arrival_time": "12:30",
                    "available_seats": 40,
                    "total_seats": 40,
                    "price": "25.50",
                }
            ]
        }
    }
