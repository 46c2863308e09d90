"""Worker service - public worker info and the worker's own views"""

import logging
from decimal import Decimal

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...models import Order, Worker
from ..orders.repository import OrderRepository

logger = logging.getLogger(__name__)


def worker_rating(worker: Worker) -> float:
    """Average rating per order, 0.0 before the first order"""
    if not worker.amount_of_orders:
        return 0.0
    return round(float(Decimal(worker.total_rating or 0) / worker.amount_of_orders), 2)


def public_worker(worker: Worker) -> dict:
    return {
        "id": worker.id,
        "full_name": worker.full_name,
        "photo_url": worker.photo_url,
        "worker_level": worker.worker_level,
        "worker_type": worker.worker_type,
        "bio": worker.bio,
        "years_of_experience": worker.years_of_experience,
        "amount_of_orders": worker.amount_of_orders,
        "rating": worker_rating(worker),
    }


def worker_profile(worker: Worker) -> dict:
    return {
        **public_worker(worker),
        "phone_number": worker.phone_number,
        "email": worker.email,
        "total_rating": float(worker.total_rating or 0),
    }


class WorkerService:
    def __init__(self, db: Session):
        self.db = db
        self.orders = OrderRepository()

    def get_worker(self, worker_id: int) -> Worker:
        worker = self.db.query(Worker).filter(Worker.id == worker_id).first()
        if not worker:
            logger.warning(f"⚠️ Worker {worker_id} not found")
            raise HTTPException(status_code=404, detail=f"Failed to fetch worker: no worker with id {worker_id}")
        return worker

    def get_assigned_orders(self, worker: Worker) -> list[Order]:
        return self.orders.get_worker_orders(self.db, worker.id)
