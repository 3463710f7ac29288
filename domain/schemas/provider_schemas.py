from pydantic import BaseModel
from typing import Optional
from uuid import UUID


class ProviderResponse(BaseModel):
    """Directory entry used when booking an appointment"""

    id: UUID
    name: str
    email: str
    specialty: str
    department: str
    license_number: Optional[str] = None
