"""CRUD operations for Account model."""

from typing import Optional
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hotelbook.crud.base import CRUDBase
from hotelbook.core.errors import DuplicateAccountError
from hotelbook.models.account import Account
from hotelbook.schemas.account import RegisterForm
from hotelbook.core.security import get_password_hash, verify_password


class CRUDAccount(CRUDBase[Account, RegisterForm, RegisterForm]):
    """CRUD operations for Account model."""

    async def get_by_username(
        self,
        db: AsyncSession,
        username: str
    ) -> Optional[Account]:
        """Get account by username."""
        result = await db.execute(
            select(Account).where(Account.username == username)
        )
        return result.scalar_one_or_none()

    async def get_by_email(
        self,
        db: AsyncSession,
        email: str
    ) -> Optional[Account]:
        """Get account by email address."""
        result = await db.execute(
            select(Account).where(Account.email == email)
        )
        return result.scalar_one_or_none()

    async def create(
        self,
        db: AsyncSession,
        *,
        obj_in: RegisterForm
    ) -> Account:
        """
        Create a new account with a hashed password.

        Raises:
            DuplicateAccountError: username or email is already taken
        """
        if await self.get_by_username(db, obj_in.username):
            raise DuplicateAccountError("A user with the given username is already registered")
        if await self.get_by_email(db, str(obj_in.email)):
            raise DuplicateAccountError("A user with the given email is already registered")

        db_obj = Account(
            username=obj_in.username,
            email=str(obj_in.email),
            hashed_password=get_password_hash(obj_in.password),
        )
        db.add(db_obj)
        try:
            await db.flush()
        except IntegrityError:
            # Lost a race with a concurrent registration for the same name or email
            await db.rollback()
            raise DuplicateAccountError("A user with the given username or email is already registered")
        await db.refresh(db_obj)
        return db_obj

    async def authenticate(
        self,
        db: AsyncSession,
        *,
        username: str,
        password: str
    ) -> Optional[Account]:
        """Authenticate an account by username and password."""
        account = await self.get_by_username(db, username=username)
        if not account:
            return None
        if not verify_password(password, account.hashed_password):
            return None
        return account


account_crud = CRUDAccount(Account)
