# dependencies.py
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from careerhub.database import SessionLocal
from careerhub.db.gateway import TableGateway
from careerhub.schemas.user import CurrentUser, TokenData
from careerhub.utils.jwt_handler import decode_access_token


# Tokens are issued by the external identity provider; tokenUrl is informational only.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token")

_gateway = TableGateway(SessionLocal)


def get_gateway() -> TableGateway:
    return _gateway


def get_current_user(token: str = Depends(oauth2_scheme)) -> CurrentUser:
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    payload = decode_access_token(token)
    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token payload")
    token_data = TokenData(user_id=str(user_id))
    return CurrentUser(id=token_data.user_id, email=payload.get("email"), role=payload.get("role"))
