from pydantic import BaseModel, ConfigDict


class ClassRequest(BaseModel):
    model_config = ConfigDict(strict=True)

    name: str = ""
    start_date: str = ""  # YYYY-MM-DD
    end_date: str = ""  # YYYY-MM-DD, inclusive
    capacity: int = 0


class ClassOut(BaseModel):
    id: str
    name: str
    date: str  # midnight UTC, e.g. 2020-12-12T00:00:00Z
    capacity: int


class BookingRequest(BaseModel):
    model_config = ConfigDict(strict=True)

    member_name: str = ""
    class_name: str = ""
    date: str = ""  # YYYY-MM-DD


class BookingOut(BaseModel):
    id: str
    member_name: str
    class_name: str
    date: str  # echoed as sent


class ErrorOut(BaseModel):
    error: str
