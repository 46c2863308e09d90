"""Worker router"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import get_current_phone, get_current_worker
from ...database import get_db
from ...models import Worker
from ..orders.schemas import OrderResponse
from ..orders.service import order_to_response
from .schemas import PublicWorker, WorkerProfile
from .service import WorkerService, public_worker, worker_profile

router = APIRouter(prefix="/workers", tags=["Workers"])


def get_worker_service(db: Session = Depends(get_db)) -> WorkerService:
    return WorkerService(db)


@router.get("/me", response_model=WorkerProfile)
async def get_me(current_worker: Worker = Depends(get_current_worker)):
    return worker_profile(current_worker)


@router.get("/me/orders", response_model=list[OrderResponse])
async def get_my_orders(
    current_worker: Worker = Depends(get_current_worker),
    service: WorkerService = Depends(get_worker_service),
):
    """Orders assigned to the signed-in worker"""
    return [order_to_response(o) for o in service.get_assigned_orders(current_worker)]


@router.get("/{worker_id}", response_model=PublicWorker)
async def get_worker(
    worker_id: int,
    _: str = Depends(get_current_phone),
    service: WorkerService = Depends(get_worker_service),
):
    return public_worker(service.get_worker(worker_id))
