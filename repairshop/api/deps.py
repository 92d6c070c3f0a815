from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from repairshop.core.config import settings
from repairshop.core.security import decode_token
from repairshop.db.session import get_db
from repairshop.domain import StoreNotFoundError
from repairshop.models.user import User
from repairshop.services.dashboard_stats import DashboardStatsService
from repairshop.stores import SqlDashboardStore

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_V1_STR}/auth/login")


def get_current_user(
    token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)
) -> User:
    credentials_error = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    user_id = decode_token(token)
    if user_id is None:
        raise credentials_error
    try:
        user = db.get(User, UUID(user_id))
    except ValueError:
        raise credentials_error
    if user is None:
        raise credentials_error
    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account is inactive",
        )
    return user


def get_store_id(current_user: User = Depends(get_current_user)) -> UUID:
    """Store (tenant) the current user works for."""
    if current_user.store_id is None:
        raise StoreNotFoundError(str(current_user.id))
    return current_user.store_id


def get_dashboard_service(db: Session = Depends(get_db)) -> DashboardStatsService:
    store = SqlDashboardStore(db)
    return DashboardStatsService(tickets=store, expenses=store, shop=store)
