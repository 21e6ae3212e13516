from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User
from app.schemas.user import UserCreate, UserLogin, UserOut
from app.schemas.tokens import Token
from app.services.auth_service import AuthService
from app.utils.auth import get_current_user

router = APIRouter()

def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(db)

@router.post("/signup", status_code=status.HTTP_201_CREATED)
def signup(user: UserCreate, auth_service: AuthService = Depends(get_auth_service)):
    auth_service.register(user)
    return {"message": "User created"}

@router.post("/signin", response_model=Token)
def signin(credentials: UserLogin, auth_service: AuthService = Depends(get_auth_service)):
    return auth_service.authenticate(credentials)

@router.get("/me", response_model=UserOut)
def read_me(current_user: User = Depends(get_current_user)):
    """Profile of the token holder"""
    return current_user
