"""Worker profiles and the FAQ screen"""

from unittest.mock import MagicMock

from qleanme import cache as cache_module
from qleanme.domain.workers.service import worker_rating
from qleanme.models import FAQ, Worker


class TestWorkers:
    def test_public_worker(self, client, user_headers, worker):
        response = client.get(f"/workers/{worker.id}", headers=user_headers)
        assert response.status_code == 200
        body = response.json()
        assert body["full_name"] == "Sam Cleaner"
        assert body["rating"] == 4.5
        assert "phone_number" not in body

    def test_missing_worker(self, client, user_headers):
        response = client.get("/workers/999", headers=user_headers)
        assert response.status_code == 404
        assert response.json()["detail"].startswith("Failed to fetch worker")

    def test_rating_without_orders(self):
        assert worker_rating(Worker(amount_of_orders=0, total_rating=0)) == 0.0

    def test_me(self, client, worker_headers):
        body = client.get("/workers/me", headers=worker_headers).json()
        assert body["phone_number"] == "+16045559876"
        assert body["total_rating"] == 18.0

    def test_me_needs_worker_account(self, client, user_headers):
        response = client.get("/workers/me", headers=user_headers)
        assert response.status_code == 403
        assert response.json()["detail"] == "Worker account required"

    def test_me_rejects_unregistered_phone(self, client, new_user_headers):
        response = client.get("/workers/me", headers=new_user_headers)
        assert response.status_code == 403
        assert response.json()["detail"] == "Worker account required"

    def test_assigned_orders(self, client, worker_headers, make_order, worker):
        assigned = make_order(cleaner_id=worker.id)
        make_order()
        orders = client.get("/workers/me/orders", headers=worker_headers).json()
        assert [o["id"] for o in orders] == [assigned.id]


class TestFAQ:
    def test_ordered_by_id(self, client, db_session):
        db_session.add_all(
            [FAQ(id=2, question="Second?", answer="B"), FAQ(id=1, question="First?", answer="A")]
        )
        db_session.commit()

        response = client.get("/faq")
        assert response.status_code == 200
        assert [item["question"] for item in response.json()] == ["First?", "Second?"]

    def test_empty(self, client):
        assert client.get("/faq").json() == []

    def test_served_from_cache(self, client, monkeypatch):
        monkeypatch.setattr(cache_module.config, "REDIS_ENABLED", True)
        fake_redis = MagicMock()
        fake_redis.get.return_value = '[{"id": 7, "question": "Cached?", "answer": "Yes"}]'
        monkeypatch.setattr(cache_module.cache, "redis_client", fake_redis)

        response = client.get("/faq")
        assert response.json() == [{"id": 7, "question": "Cached?", "answer": "Yes"}]
        fake_redis.get.assert_called_once_with("faq:all")

    def test_cache_filled_on_miss(self, client, db_session, monkeypatch):
        db_session.add(FAQ(question="Q?", answer="A"))
        db_session.commit()
        monkeypatch.setattr(cache_module.config, "REDIS_ENABLED", True)
        fake_redis = MagicMock()
        fake_redis.get.return_value = None
        monkeypatch.setattr(cache_module.cache, "redis_client", fake_redis)

        client.get("/faq")
        key, ttl, _ = fake_redis.setex.call_args.args
        assert (key, ttl) == ("faq:all", 600)
