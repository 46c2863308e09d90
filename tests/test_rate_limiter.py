"""Login rate limiting: per-IP and per-phone attempt counters"""

import itertools
from unittest.mock import MagicMock

import pytest
import redis
from starlette.requests import Request

from qleanme import rate_limiter


@pytest.fixture(autouse=True)
def clear_attempts():
    rate_limiter.attempts.clear()
    yield
    rate_limiter.attempts.clear()


@pytest.fixture
def fake_redis():
    client = MagicMock()
    client.get.return_value = None
    client.ttl.return_value = -2
    return client


@pytest.fixture
def redis_on(monkeypatch, fake_redis):
    monkeypatch.setattr(rate_limiter.config, "REDIS_ENABLED", True)
    monkeypatch.setattr(rate_limiter, "redis_client", fake_redis)
    return fake_redis


def make_request(forwarded=None, peer="10.0.0.7"):
    headers = [(b"x-forwarded-for", forwarded.encode())] if forwarded else []
    return Request({"type": "http", "method": "POST", "path": "/", "headers": headers, "client": (peer, 5000)})


class TestAttemptCounter:
    def test_allows_up_to_limit(self, fake_redis):
        counter = rate_limiter.AttemptCounter()
        results = [counter.hit("k", 3, 60, fake_redis)[0] for _ in range(4)]
        assert results == [True, True, True, False]

    def test_resumes_from_redis_count(self, fake_redis):
        fake_redis.get.return_value = "5"
        fake_redis.ttl.return_value = 30
        allowed, used, retry_after = rate_limiter.AttemptCounter().hit("k", 5, 60, fake_redis)
        assert allowed is False
        assert used == 5
        assert 0 < retry_after <= 30

    def test_redis_read_failure_counts_locally(self, fake_redis):
        fake_redis.get.side_effect = redis.ConnectionError("down")
        allowed, used, _ = rate_limiter.AttemptCounter().hit("k", 2, 60, fake_redis)
        assert allowed is True
        assert used == 1

    def test_new_window_written_with_remaining_ttl(self, fake_redis):
        rate_limiter.AttemptCounter().hit("k", 5, 60, fake_redis)
        key, count = fake_redis.set.call_args.args
        assert (key, count) == ("k", 1)
        assert 0 < fake_redis.set.call_args.kwargs["ex"] <= 60


class TestClientIp:
    def test_forwarded_header_ignored_by_default(self):
        assert rate_limiter.client_ip(make_request(forwarded="1.2.3.4")) == "10.0.0.7"

    def test_trusted_proxy_hop(self, monkeypatch):
        monkeypatch.setattr(rate_limiter.config, "TRUST_PROXY_HEADERS", True)
        request = make_request(forwarded="1.2.3.4, 203.0.113.9")
        assert rate_limiter.client_ip(request) == "203.0.113.9"


class TestLoginRateLimit:
    def test_disabled_without_redis(self, client):
        for _ in range(15):
            response = client.post("/auth/login", json={"phone_number": "6045550000"})
        assert response.status_code == 200

    def test_blocks_after_limit(self, client, redis_on):
        statuses = [
            client.post("/auth/login", json={"phone_number": "6045550000"}).status_code
            for _ in range(11)
        ]
        assert statuses[:10] == [200] * 10
        assert statuses[10] == 429

    def test_rotating_forwarded_header_does_not_reset(self, client, redis_on):
        statuses = [
            client.post(
                "/auth/verify",
                json={"phone_number": f"60455500{i:02d}", "code": "123456"},
                headers={"X-Forwarded-For": f"198.51.100.{i}"},
            ).status_code
            for i in range(11)
        ]
        assert statuses[10] == 429

    def test_phone_limit_applies_across_ips(self, client, redis_on, monkeypatch):
        addresses = (f"198.51.100.{i}" for i in itertools.count())
        monkeypatch.setattr(rate_limiter, "client_ip", lambda request: next(addresses))

        statuses = [
            client.post("/auth/verify", json={"phone_number": "6045550000", "code": "123456"}).status_code
            for _ in range(11)
        ]
        assert statuses[:10] == [200] * 10
        assert statuses[10] == 429

    def test_other_numbers_unaffected_by_phone_limit(self, client, redis_on):
        for _ in range(10):
            rate_limiter.attempts.hit("rate_limit:auth_login:phone:+16045550000", 10, 600, redis_on)

        blocked = client.post("/auth/login", json={"phone_number": "6045550000"})
        assert blocked.status_code == 429
        assert blocked.headers["Retry-After"]
        assert client.post("/auth/login", json={"phone_number": "6045550001"}).status_code == 200

    def test_fails_closed_when_redis_is_down(self, client, monkeypatch):
        monkeypatch.setattr(rate_limiter.config, "REDIS_ENABLED", True)

        def unavailable():
            raise ConnectionError("redis down")

        monkeypatch.setattr(rate_limiter, "get_redis_client", unavailable)
        response = client.post("/auth/verify", json={"phone_number": "6045550000", "code": "123456"})
        assert response.status_code == 503
