# user.py
from pydantic import BaseModel


class CurrentUser(BaseModel):
    # Token subject; equals profiles.id.
    id: str
    email: str | None = None
    role: str | None = None


class TokenData(BaseModel):
    user_id: str
