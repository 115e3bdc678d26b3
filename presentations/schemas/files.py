from typing import Literal
from pydantic import BaseModel, Field


class FileEntry(BaseModel):
    name: str
    size: int = Field(ge=0)


class UploadOutcome(BaseModel):
    name: str
    status: Literal["uploaded", "too_large", "rejected", "failed"]
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status == "uploaded"
