from pydantic import BaseModel, AnyUrl, Field, ConfigDict, field_serializer, field_validator
from typing import Optional, Any, Dict
from datetime import datetime


class LinkCreate(BaseModel):
    """Submission of the add operation"""
    url: AnyUrl = Field(..., description="The destination URL to be shortened")
    path: Optional[str] = Field(None, description="Caller-chosen short path")

    @field_validator("url")
    @classmethod
    def check_scheme(cls, value: AnyUrl) -> AnyUrl:
        # Destinations are unbounded in length, unlike HttpUrl (2083)
        if value.scheme not in ("http", "https"):
            raise ValueError(f"URL scheme must be http or https, got {value.scheme}")
        return value


class LinkOut(BaseModel):
    """Link as rendered on the wire: {"Path", "URL", "Created"}

    from_attributes=True reads straight from the SQLAlchemy Link model.
    """
    path: str = Field(serialization_alias="Path")
    url: str = Field(serialization_alias="URL")
    created: Optional[datetime] = Field(None, serialization_alias="Created")

    model_config = ConfigDict(from_attributes=True)


class AddSuccessResponse(BaseModel):
    success: bool = Field(True, serialization_alias="Success")
    result_url: str = Field(serialization_alias="ResultURL")


class ResolveResponse(BaseModel):
    success: bool = Field(serialization_alias="Success")
    result: Optional[LinkOut] = Field(None, serialization_alias="Result")

    @field_serializer("result")
    def serialize_result(self, result: Optional[LinkOut]) -> Dict[str, Any]:
        # The empty Link renders as an empty object, never null
        if result is None:
            return {}
        return result.model_dump(mode="json", by_alias=True)


class ErrorEnvelope(BaseModel):
    """Body of every non-500 error response"""
    error: Optional[str] = Field(None, serialization_alias="Error")
    message: str = Field(serialization_alias="Message")
    code: int = Field(serialization_alias="Code")
