# app/schemas/common.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Reads and writes the camelCase keys used by the web forms"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SubmissionResponse(BaseModel):
    """Result of a successful form submission"""
    success: bool = True
    id: str
    message: str


class StatusUpdateResponse(BaseModel):
    success: bool = True
    message: str
