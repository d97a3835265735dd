from pydantic import BaseModel

class OperationResult(BaseModel):
    success: bool
    message: str  # Localized text meant for the user, not a machine-readable code

    class Config:
        frozen = True
