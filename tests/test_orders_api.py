"""Booking and managing orders"""

from datetime import timedelta

import pytest

from conftest import booking_time
from qleanme.models import Order, OrderAddon, Worker


def iso(value):
    return value.isoformat()


class TestCreateOrders:
    def test_home_cleaning(self, client, user_headers, db_session):
        response = client.post(
            "/orders/home-cleaning",
            json={
                "cleaning_type": "Deep Cleaning",
                "bedrooms": 3,
                "bathrooms": 2,
                "property_size": "Medium",
                "additional_services": ["Oven Transformation", "Crystal Clear Windows"],
                "date_time": iso(booking_time()),
                "address": "123 Main St, Vancouver",
                "has_pets": True,
                "pet_details": "One friendly cat",
                "supplies": "bring",
            },
            headers=user_headers,
        )
        assert response.status_code == 201
        body = response.json()
        assert body["type"] == "Deep Cleaning"
        assert body["status"] == "pending"
        assert body["price"] == 439.49
        assert body["duration"] == 120
        assert body["worker"] is None
        assert body["addons"] == ["Oven Transformation", "Crystal Clear Windows"]
        assert body["formatted_price"] == "439.49"
        assert body["formatted_duration"] == "2h 0m"
        assert "One friendly cat" in body["special_instructions"]
        assert "Bring supplies" in body["special_instructions"]

        assert db_session.query(OrderAddon).filter(OrderAddon.order_id == body["id"]).count() == 2

    def test_client_price_is_ignored(self, client, user_headers):
        response = client.post(
            "/orders/home-cleaning",
            json={"date_time": iso(booking_time()), "address": "Somewhere", "price": 1},
            headers=user_headers,
        )
        assert response.json()["price"] == 129.99

    def test_pets_need_details(self, client, user_headers):
        response = client.post(
            "/orders/home-cleaning",
            json={"date_time": iso(booking_time()), "address": "Somewhere", "has_pets": True},
            headers=user_headers,
        )
        assert response.status_code == 422

    def test_outside_service_hours(self, client, user_headers):
        response = client.post(
            "/orders/car-detailing",
            json={"date_time": iso(booking_time(hour=21)), "address": "Somewhere"},
            headers=user_headers,
        )
        assert response.status_code == 422
        assert "Please select a time between 8 AM and 8 PM" in response.text

    @pytest.mark.parametrize("when", ["2001-01-01T10:00:00", iso(booking_time(days_ahead=-1))])
    def test_past_date_rejected(self, client, user_headers, db_session, when):
        response = client.post(
            "/orders/car-detailing",
            json={"date_time": when, "address": "Somewhere"},
            headers=user_headers,
        )
        assert response.status_code == 422
        assert "Please select a date and time in the future" in response.text
        assert db_session.query(Order).count() == 0

    def test_base_cleaning(self, client, user_headers):
        response = client.post(
            "/orders/base-cleaning",
            json={
                "additional_services": ["Fridge cleaning"],
                "recurring_option": "Every week",
                "date_time": iso(booking_time()),
                "address": "Somewhere",
            },
            headers=user_headers,
        )
        body = response.json()
        assert response.status_code == 201
        assert body["type"] == "Base Cleaning"
        assert body["price"] == 102.0
        assert body["addons"] == ["Fridge cleaning", "Bring cleaning products"]
        assert body["price_breakdown"]["discount"] == 18.0

    def test_laundry_uses_default_address(self, client, user_headers, default_address):
        response = client.post(
            "/orders/laundry",
            json={
                "service": "Washing",
                "load_size": "Medium",
                "addons": ["Stain Removal"],
                "date_time": iso(booking_time(days_ahead=2)),
            },
            headers=user_headers,
        )
        assert response.status_code == 201
        body = response.json()
        assert body["address"] == default_address.full_address
        assert body["type"] == "Laundry - Washing"
        assert body["price"] == 49.62

    def test_laundry_needs_pickup_address(self, client, user_headers):
        response = client.post(
            "/orders/laundry",
            json={"date_time": iso(booking_time(days_ahead=2)), "address": "  "},
            headers=user_headers,
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Please select a pickup address"

    def test_dry_clean_lead_time(self, client, user_headers):
        response = client.post(
            "/orders/laundry",
            json={"service": "Dry Clean", "date_time": iso(booking_time(days_ahead=1)), "address": "Here"},
            headers=user_headers,
        )
        assert response.status_code == 422

    def test_car_detailing(self, client, user_headers):
        response = client.post(
            "/orders/car-detailing",
            json={
                "car_type": "SUV",
                "depth": "Light",
                "addons": ["Engine Bay Cleaning"],
                "date_time": iso(booking_time()),
                "address": "Parking lot",
            },
            headers=user_headers,
        )
        body = response.json()
        assert body["type"] == "SUV Detailing"
        assert body["price"] == 309.47

    def test_requires_registered_user(self, client, new_user_headers):
        response = client.post(
            "/orders/car-detailing",
            json={"date_time": iso(booking_time()), "address": "Parking lot"},
            headers=new_user_headers,
        )
        assert response.status_code == 401


class TestOrderHistory:
    def test_list_newest_first(self, client, user_headers, make_order, worker):
        older = make_order(date_time=booking_time(days_ahead=2))
        newer = make_order(date_time=booking_time(days_ahead=9), cleaner_id=worker.id, addons=["Extra Rinse"])

        orders = client.get("/orders", headers=user_headers).json()
        assert [o["id"] for o in orders] == [newer.id, older.id]
        assert orders[0]["worker"]["full_name"] == "Sam Cleaner"
        assert orders[0]["worker"]["rating"] == 4.5
        assert orders[0]["addons"] == ["Extra Rinse"]
        assert orders[1]["worker"] is None

    def test_filter_completed(self, client, user_headers, make_order):
        make_order()
        done = make_order(is_completed=True)
        orders = client.get("/orders", params={"completed": True}, headers=user_headers).json()
        assert [o["id"] for o in orders] == [done.id]

    def test_get_order(self, client, user_headers, make_order):
        order = make_order(addons=["Oven Transformation"])
        body = client.get(f"/orders/{order.id}", headers=user_headers).json()
        assert body["id"] == order.id
        assert body["formatted_price"] == "199.99"

        addons = client.get(f"/orders/{order.id}/addons", headers=user_headers).json()
        assert addons == ["Oven Transformation"]

    def test_other_users_order_is_hidden(self, client, user_headers, make_order, db_session):
        from qleanme.models import User

        other = User(
            id=2,
            full_name="Other",
            email="o@example.com",
            phone_number="+16045552222",
            signup_date=booking_time().date(),
        )
        db_session.add(other)
        db_session.commit()
        order = make_order(user_id=other.id)
        response = client.get(f"/orders/{order.id}", headers=user_headers)
        assert response.status_code == 404
        assert response.json()["detail"] == "Order not found"


class TestCancel:
    def test_cancel_deletes_addons(self, client, user_headers, make_order, db_session):
        order = make_order(addons=["Oven Transformation", "Cabinet Refresh"])
        order_id = order.id
        response = client.delete(f"/orders/{order_id}", headers=user_headers)
        assert response.status_code == 200

        db_session.expire_all()
        assert db_session.get(Order, order_id) is None
        assert db_session.query(OrderAddon).filter(OrderAddon.order_id == order_id).count() == 0

    def test_completed_orders_stay(self, client, user_headers, make_order):
        order = make_order(is_completed=True)
        assert client.delete(f"/orders/{order.id}", headers=user_headers).status_code == 400


class TestRating:
    def test_rate_completed_order(self, client, user_headers, make_order, worker, db_session):
        order = make_order(is_completed=True, cleaner_id=worker.id)
        response = client.post(f"/orders/{order.id}/rating", json={"rating": 5}, headers=user_headers)
        assert response.status_code == 200
        assert response.json()["rating"] == 5

        db_session.expire_all()
        rated = db_session.get(Worker, worker.id)
        assert float(rated.total_rating) == 23.0
        assert rated.amount_of_orders == 5

    def test_worker_rating_stays_in_range(self, client, user_headers, make_order, worker):
        for _ in range(3):
            order = make_order(is_completed=True, cleaner_id=worker.id)
            response = client.post(f"/orders/{order.id}/rating", json={"rating": 5}, headers=user_headers)
            assert response.status_code == 200

        rating = client.get(f"/workers/{worker.id}", headers=user_headers).json()["rating"]
        assert 0 <= rating <= 5
        assert rating == 4.71

    def test_first_rating_for_new_worker(self, client, user_headers, make_order, db_session):
        newcomer = Worker(full_name="New Hire", phone_number="+16045551111", email="new@qleanme.com")
        db_session.add(newcomer)
        db_session.commit()
        order = make_order(is_completed=True, cleaner_id=newcomer.id)

        client.post(f"/orders/{order.id}/rating", json={"rating": 4}, headers=user_headers)
        assert client.get(f"/workers/{newcomer.id}", headers=user_headers).json()["rating"] == 4.0

    def test_only_once(self, client, user_headers, make_order):
        order = make_order(is_completed=True, rating=4)
        response = client.post(f"/orders/{order.id}/rating", json={"rating": 5}, headers=user_headers)
        assert response.status_code == 409

    def test_not_completed(self, client, user_headers, make_order):
        order = make_order()
        response = client.post(f"/orders/{order.id}/rating", json={"rating": 5}, headers=user_headers)
        assert response.status_code == 400

    @pytest.mark.parametrize("rating", [0, 6])
    def test_range(self, client, user_headers, make_order, rating):
        order = make_order(is_completed=True)
        response = client.post(f"/orders/{order.id}/rating", json={"rating": rating}, headers=user_headers)
        assert response.status_code == 422


class TestReview:
    def test_review_falls_back_to_vancouver(self, client, user_headers, make_order, monkeypatch):
        from qleanme.domain.geocoding import service as geocoding

        async def no_coordinates(address):
            return None

        monkeypatch.setattr(geocoding, "_lookup_coordinates", no_coordinates)
        when = booking_time() + timedelta(minutes=30)
        order = make_order(date_time=when, price=1234.5, addons=["Cabinet Refresh"])

        body = client.get(f"/orders/{order.id}/review", headers=user_headers).json()
        assert body["items"] == ["Deep Cleaning", "Cabinet Refresh"]
        assert body["latitude"] == 49.2827
        assert body["longitude"] == -123.1207
        assert body["formatted_total"] == "$1,234.50"
        assert body["formatted_date"].endswith("at 10:30 AM")
