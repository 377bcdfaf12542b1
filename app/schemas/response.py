from pydantic import BaseModel
from typing import Optional, Any, List

class ErrorResponse(BaseModel):
    """
    Standard error response structure.
    """
    error: str
    code: str
    details: Optional[Any] = None

class ServiceInfo(BaseModel):
    name: str
    version: str
    environment: str
    endpoints: List[str]
