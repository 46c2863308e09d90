"""User repository - Database operations for customers and their addresses"""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ...models import Address, Order, User


class UserRepository:
    """Repository for user database operations"""

    @staticmethod
    def get_by_phone(db: Session, phone_number: str) -> Optional[User]:
        return db.query(User).filter(User.phone_number == phone_number).first()

    @staticmethod
    def next_user_id(db: Session) -> int:
        """Ids are not generated by the database"""
        max_id = db.query(func.max(User.id)).scalar()
        return (max_id or 0) + 1

    @staticmethod
    def create_user(db: Session, **user_data) -> User:
        user = User(**user_data)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    @staticmethod
    def update_user(db: Session, user: User, **updates) -> User:
        """Update a user with provided fields"""
        for key, value in updates.items():
            if value is not None and hasattr(user, key):
                setattr(user, key, value)

        db.commit()
        db.refresh(user)
        return user

    @staticmethod
    def order_stats(db: Session, user_id: int) -> tuple[int, float]:
        """Completed order count and the average of all given ratings"""
        completed = (
            db.query(func.count(Order.id))
            .filter(Order.user_id == user_id, Order.is_completed.is_(True))
            .scalar()
        )
        average = (
            db.query(func.avg(Order.rating))
            .filter(Order.user_id == user_id, Order.rating.isnot(None))
            .scalar()
        )
        return completed or 0, float(average or 0.0)

    @staticmethod
    def count_upcoming_orders(db: Session, user_id: int) -> int:
        return (
            db.query(func.count(Order.id))
            .filter(Order.user_id == user_id, Order.is_completed.is_(False))
            .scalar()
        ) or 0

    @staticmethod
    def get_addresses(db: Session, user_id: int) -> list[Address]:
        return db.query(Address).filter(Address.user_id == user_id).order_by(Address.id).all()

    @staticmethod
    def get_address(db: Session, address_id: int, user_id: int) -> Optional[Address]:
        return db.query(Address).filter(Address.id == address_id, Address.user_id == user_id).first()

    @staticmethod
    def get_default_address(db: Session, user_id: int) -> Optional[Address]:
        return (
            db.query(Address)
            .filter(Address.user_id == user_id, Address.is_default.is_(True))
            .first()
        )

    @staticmethod
    def create_address(db: Session, user_id: int, make_default: bool, **address_data) -> Address:
        if make_default:
            db.query(Address).filter(Address.user_id == user_id).update({Address.is_default: False})
        address = Address(user_id=user_id, is_default=make_default, **address_data)
        db.add(address)
        db.commit()
        db.refresh(address)
        return address

    @staticmethod
    def delete_address(db: Session, address: Address) -> None:
        """Delete an address, handing the default flag to the oldest remaining one"""
        user_id = address.user_id
        was_default = address.is_default
        db.delete(address)
        db.flush()

        if was_default:
            replacement = (
                db.query(Address).filter(Address.user_id == user_id).order_by(Address.id).first()
            )
            if replacement:
                replacement.is_default = True

        db.commit()
