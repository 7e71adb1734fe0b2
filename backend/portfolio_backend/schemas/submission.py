from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime

REQUIRED_FIELDS = ("name", "email", "prompt")


class SubmissionCreate(BaseModel):
    # Presence is checked by the route so a missing field yields 400, not 422
    name: Optional[str] = None
    email: Optional[str] = None
    about: Optional[str] = None
    prompt: Optional[str] = None

    def missing_fields(self) -> List[str]:
        return [field for field in REQUIRED_FIELDS if not getattr(self, field)]


class SubmissionResponse(BaseModel):
    id: int
    name: str
    email: str
    about: Optional[str] = None
    prompt: str
    submission_date: Optional[datetime] = None

    class Config:
        from_attributes = True
