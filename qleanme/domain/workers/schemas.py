"""Worker domain schemas"""

from typing import Optional

from pydantic import BaseModel


class PublicWorker(BaseModel):
    """What a customer sees about the worker assigned to their order"""

    id: int
    full_name: str
    photo_url: Optional[str] = None
    worker_level: str
    worker_type: str
    bio: str
    years_of_experience: int
    amount_of_orders: int
    rating: float


class WorkerProfile(PublicWorker):
    phone_number: str
    email: str
    total_rating: float
