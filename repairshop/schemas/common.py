from pydantic import BaseModel


# Error responses
class ErrorResponse(BaseModel):
    detail: str
