# foodcourt/schemas/day_end_schemas.py
from datetime import datetime
from typing import List

from pydantic import BaseModel


class DayEndReportFile(BaseModel):
    filename: str
    size_bytes: int
    modified_at: datetime


class DayEndReportList(BaseModel):
    directory: str
    reports: List[DayEndReportFile] = []
