#!/usr/bin/env python3
"""
Script to seed FAQ entries and demo workers for local development
Safe to run repeatedly: existing rows are matched and updated
"""

from qleanme.cache import invalidate_faq_cache
from qleanme.database import Base, SessionLocal, engine
from qleanme.models import FAQ, Worker

FAQ_ENTRIES = [
    (
        "How do I book a cleaning?",
        "Choose a service on the home screen, pick your options, date and address, then confirm your order.",
    ),
    (
        "What hours do you work?",
        "Bookings are available every day between 8 AM and 8 PM.",
    ),
    (
        "Do I need to provide cleaning supplies?",
        "No. You can use your own supplies or ask the cleaner to bring professional products for a small fee.",
    ),
    (
        "How far ahead can I book laundry pickup?",
        "Pickups open from tomorrow (three days ahead for dry cleaning) and can be booked up to two months out.",
    ),
    (
        "Can I cancel an order?",
        "Yes, any order that has not been completed can be cancelled from the Orders screen.",
    ),
    (
        "How do I rate my cleaner?",
        "Once an order is completed you can rate it from one to five stars in your order history.",
    ),
]

WORKERS = [
    {
        "full_name": "Anna Kowalski",
        "phone_number": "+16045550101",
        "email": "anna@qleanme.com",
        "worker_level": "pro",
        "bio": "Deep cleaning specialist with an eye for detail.",
        "years_of_experience": 6,
        "worker_type": "cleaner",
    },
    {
        "full_name": "Marco Silva",
        "phone_number": "+16045550102",
        "email": "marco@qleanme.com",
        "worker_level": "standard",
        "bio": "Car detailing and pressure washing.",
        "years_of_experience": 3,
        "worker_type": "detailer",
    },
]


def seed():
    Base.metadata.create_all(bind=engine, checkfirst=True)
    db = SessionLocal()

    try:
        print("🔍 Seeding FAQ entries...")
        for question, answer in FAQ_ENTRIES:
            faq = db.query(FAQ).filter(FAQ.question == question).first()
            if faq:
                faq.answer = answer
                print(f"   ↻ Updated: {question}")
            else:
                db.add(FAQ(question=question, answer=answer))
                print(f"   ✅ Inserted: {question}")

        print("\n🔍 Seeding workers...")
        for data in WORKERS:
            worker = db.query(Worker).filter(Worker.phone_number == data["phone_number"]).first()
            if worker:
                for key, value in data.items():
                    setattr(worker, key, value)
                print(f"   ↻ Updated: {data['full_name']}")
            else:
                db.add(Worker(**data))
                print(f"   ✅ Inserted: {data['full_name']}")

        db.commit()
        invalidate_faq_cache()
        print("\n✅ Seed complete")
    except Exception as e:
        db.rollback()
        print(f"\n❌ Seed failed: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed()
