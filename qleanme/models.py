import uuid

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .database import Base


def generate_order_id():
    """Orders are keyed by UUID strings, matching the remote schema"""
    return str(uuid.uuid4())


class User(Base):
    __tablename__ = "users"

    # Not autoincrement: ids are handed out as max(id) + 1 on registration
    id = Column(Integer, primary_key=True, autoincrement=False)
    full_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone_number = Column(String(20), unique=True, index=True, nullable=False)  # E.164
    notifications_enabled = Column(Boolean, default=False, nullable=False)
    signup_date = Column(Date, nullable=False)
    loyalty_points = Column(Integer, default=0, nullable=False)
    photo_url = Column(String(500), nullable=True)
    # App settings screen
    auto_tipping_enabled = Column(Boolean, default=False, nullable=False)
    auto_tip_percentage = Column(Float, nullable=True)  # None/0 reads as the 15% default

    orders = relationship("Order", back_populates="user", cascade="all, delete-orphan")
    addresses = relationship(
        "Address", back_populates="user", cascade="all, delete-orphan", order_by="Address.id"
    )


class Worker(Base):
    __tablename__ = "workers"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String(255), nullable=False)
    phone_number = Column(String(20), unique=True, index=True, nullable=False)
    email = Column(String(255), nullable=False)
    amount_of_orders = Column(Integer, default=0, nullable=False)
    total_rating = Column(Numeric(10, 2), default=0, nullable=False)  # Sum of all order ratings
    worker_level = Column(String(50), nullable=False, default="standard")
    bio = Column(Text, nullable=False, default="")
    years_of_experience = Column(Integer, default=0, nullable=False)
    worker_type = Column(String(50), nullable=False, default="cleaner")
    photo_url = Column(String(500), nullable=False, default="")

    orders = relationship("Order", back_populates="worker")


class Order(Base):
    __tablename__ = "orders"

    id = Column(String(36), primary_key=True, default=generate_order_id)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    cleaner_id = Column(Integer, ForeignKey("workers.id"), nullable=True, index=True)  # None until assigned
    type = Column(String(100), nullable=False)  # e.g. "Deep Cleaning", "SUV Detailing"
    status = Column(String(50), nullable=False, default="pending")
    date_time = Column(DateTime, nullable=False)
    address = Column(String(500), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    is_completed = Column(Boolean, default=False, nullable=False)
    rating = Column(Integer, nullable=True)  # 1-5, set by the customer after completion
    receipt_url = Column(String(500), nullable=True)
    duration = Column(Integer, nullable=False, default=120)  # minutes
    special_instructions = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="orders")
    worker = relationship("Worker", back_populates="orders")
    addons = relationship(
        "OrderAddon", back_populates="order", cascade="all, delete-orphan", order_by="OrderAddon.id"
    )


class OrderAddon(Base):
    __tablename__ = "order_addons"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(String(36), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    addon = Column(String(255), nullable=False)

    order = relationship("Order", back_populates="addons")


class FAQ(Base):
    __tablename__ = "faq"

    id = Column(Integer, primary_key=True, index=True)
    question = Column(Text, nullable=False)
    answer = Column(Text, nullable=False)


class Address(Base):
    __tablename__ = "addresses"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(100), nullable=False)  # "Home", "Work", "Gym"
    full_address = Column(String(500), nullable=False)
    address_type = Column(String(20), nullable=False, default="other")  # home, work, other
    is_default = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="addresses")
