from pydantic import BaseModel


class MessageResponse(BaseModel):
    """DTO for endpoints that answer with a plain status message"""
    message: str
