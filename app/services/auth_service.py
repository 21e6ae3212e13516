import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.user import User
from app.schemas.tokens import Token, TokenPayload
from app.schemas.user import UserCreate, UserLogin
from app.services.errors import ConflictError, InternalError, UnauthorizedError
from app.utils.security import create_access_token, hash_password, verify_password


class AuthService:
    """Registers accounts and exchanges credentials for access tokens"""

    def __init__(self, db: Session, logger: Optional[logging.Logger] = None):
        self.db = db
        self.logger = logger or logging.getLogger(__name__)

    def register(self, user: UserCreate) -> None:
        # Duplicate e-mails are caught by the unique index, not a pre-check
        try:
            db_user = User(
                full_name=user.full_name,
                email=user.email,
                hashed_password=hash_password(user.password),
            )
            self.db.add(db_user)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            self.logger.warning("Signup rejected for %s: %s", user.email, e.orig)
            raise ConflictError("Email already in use")
        except (SQLAlchemyError, ValueError):
            self.db.rollback()
            self.logger.exception("Could not persist user %s", user.email)
            raise InternalError()

        self.logger.info("User %s registered", db_user.id)

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def authenticate(self, credentials: UserLogin) -> Token:
        user = self.find_by_email(credentials.email)
        # Same error for unknown e-mail and wrong password
        if not user or not verify_password(credentials.password, user.hashed_password):
            raise UnauthorizedError("Check your credentials")

        payload = TokenPayload(id=user.id, full_name=user.full_name, email=user.email)
        token = create_access_token(data={"sub": user.email, **payload.model_dump(by_alias=True)})
        self.logger.info("User %s signed in", user.id)
        return Token(access_token=token, token_type="bearer")
