from datetime import datetime

from pydantic import BaseModel


class HealthResponseDTO(BaseModel):
    status: str
    timestamp: datetime
