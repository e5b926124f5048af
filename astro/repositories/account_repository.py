"""Account table access."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import delete, func, select, update

from astro.db.models import Account
from astro.db.session import Database


class AccountRepository:
    def __init__(self, database: Database) -> None:
        self.db = database

    def get_by_id(self, account_id: int) -> Optional[Account]:
        with self.db.session() as session:
            return session.get(Account, account_id)

    def get_by_phone(self, phone: str) -> Optional[Account]:
        with self.db.session() as session:
            stmt = select(Account).where(Account.phone == phone).limit(1)
            return session.execute(stmt).scalar_one_or_none()

    def phone_exists(self, phone: str) -> bool:
        with self.db.session() as session:
            stmt = select(Account.id).where(Account.phone == phone).limit(1)
            return session.execute(stmt).first() is not None

    def list_accounts(self) -> list[Account]:
        with self.db.session() as session:
            return list(session.execute(select(Account).order_by(Account.id)).scalars().all())

    def count(self) -> int:
        with self.db.session() as session:
            return int(session.execute(select(func.count()).select_from(Account)).scalar_one())

    def create(
        self,
        phone: str,
        fullname: str,
        password_hash: str,
        *,
        email: str | None = None,
        role: str = "user",
    ) -> Account:
        """Insert an account; IntegrityError propagates when the phone is taken."""
        entity = Account(phone=phone, fullname=fullname, email=email, password_hash=password_hash, role=role)
        with self.db.session() as session:
            session.add(entity)
            try:
                session.commit()
            except Exception:
                session.rollback()
                raise
            session.refresh(entity)
            return entity

    def update_password(self, account_id: int, password_hash: str) -> bool:
        with self.db.session() as session:
            stmt = update(Account).where(Account.id == account_id).values(password_hash=password_hash)
            result = session.execute(stmt)
            session.commit()
            return result.rowcount > 0

    def update_password_by_phone(self, phone: str, password_hash: str) -> bool:
        with self.db.session() as session:
            stmt = update(Account).where(Account.phone == phone).values(password_hash=password_hash)
            result = session.execute(stmt)
            session.commit()
            return result.rowcount > 0

    def update_profile(
        self,
        account_id: int,
        *,
        phone: str,
        fullname: str,
        email: str | None,
        role: str,
    ) -> bool:
        with self.db.session() as session:
            stmt = (
                update(Account)
                .where(Account.id == account_id)
                .values(phone=phone, fullname=fullname, email=email, role=role)
            )
            try:
                result = session.execute(stmt)
                session.commit()
            except Exception:
                session.rollback()
                raise
            return result.rowcount > 0

    def set_role(self, account_id: int, role: str) -> bool:
        with self.db.session() as session:
            result = session.execute(update(Account).where(Account.id == account_id).values(role=role))
            session.commit()
            return result.rowcount > 0

    def delete(self, account_id: int) -> bool:
        with self.db.session() as session:
            result = session.execute(delete(Account).where(Account.id == account_id))
            session.commit()
            return result.rowcount > 0
