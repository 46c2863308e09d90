"""Order repository - Database operations for orders and their add-ons"""

from typing import Optional

from sqlalchemy.orm import Session, joinedload

from ...models import Order, OrderAddon


class OrderRepository:
    """Repository for order database operations"""

    @staticmethod
    def get_orders(db: Session, user_id: int, completed: Optional[bool] = None) -> list[Order]:
        """A user's orders, most recent appointment first"""
        query = (
            db.query(Order)
            .options(joinedload(Order.addons), joinedload(Order.worker))
            .filter(Order.user_id == user_id)
        )
        if completed is not None:
            query = query.filter(Order.is_completed.is_(completed))
        return query.order_by(Order.date_time.desc()).all()

    @staticmethod
    def get_order(db: Session, order_id: str, user_id: int) -> Optional[Order]:
        return (
            db.query(Order)
            .options(joinedload(Order.addons), joinedload(Order.worker))
            .filter(Order.id == order_id, Order.user_id == user_id)
            .first()
        )

    @staticmethod
    def get_worker_orders(db: Session, worker_id: int) -> list[Order]:
        return (
            db.query(Order)
            .options(joinedload(Order.addons))
            .filter(Order.cleaner_id == worker_id)
            .order_by(Order.date_time.desc())
            .all()
        )

    @staticmethod
    def create_order(db: Session, addon_names: list[str], **order_data) -> Order:
        """Insert the order and its add-on rows in one transaction"""
        order = Order(**order_data)
        order.addons = [OrderAddon(addon=name) for name in addon_names]
        db.add(order)
        db.commit()
        db.refresh(order)
        return order

    @staticmethod
    def update_order(db: Session, order: Order, **updates) -> Order:
        for key, value in updates.items():
            if hasattr(order, key):
                setattr(order, key, value)

        db.commit()
        db.refresh(order)
        return order

    @staticmethod
    def transition_status(db: Session, order: Order, new_status: str, blocked: list[str]) -> bool:
        """Set the status unless the stored row is already in one of `blocked`.

        The check and the write are one UPDATE, so of two racing callers only
        one sees a changed row.
        """
        changed = (
            db.query(Order)
            .filter(Order.id == order.id, Order.status.notin_(blocked))
            .update({Order.status: new_status}, synchronize_session=False)
        )
        db.commit()
        db.refresh(order)
        return changed == 1

    @staticmethod
    def delete_order(db: Session, order: Order) -> None:
        """Delete an order; add-on rows go with it"""
        db.delete(order)
        db.commit()
