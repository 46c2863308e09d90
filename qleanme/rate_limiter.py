"""
Rate limiting for the phone login flow

Attempts are counted per client IP and per phone number. Counters live in
process memory and are written through to Redis every few seconds, so API
workers converge on a shared count without a Redis round trip per request.
With REDIS_ENABLED=false the limits are off.
"""

import logging
import os
import time
from dataclasses import dataclass
from threading import Lock
from typing import Optional
from urllib.parse import quote

import redis
from fastapi import HTTPException, Request, status

from . import config

logger = logging.getLogger(__name__)

SYNC_INTERVAL_SECONDS = 10
PRUNE_INTERVAL_SECONDS = 60

redis_client: Optional[redis.Redis] = None


def redis_url() -> str:
    """REDIS_URL, or one assembled from the REDIS_HOST/PORT/PASSWORD/DB/SSL settings"""
    url = os.getenv("REDIS_URL")
    if url:
        return url

    scheme = "rediss" if os.getenv("REDIS_SSL", "false").lower() == "true" else "redis"
    password = os.getenv("REDIS_PASSWORD")
    credentials = f":{quote(password, safe='')}@" if password else ""
    host = os.getenv("REDIS_HOST", "localhost")
    port = os.getenv("REDIS_PORT", "6379")
    db = os.getenv("REDIS_DB", "0")
    return f"{scheme}://{credentials}{host}:{port}/{db}"


def mask_url(url: str) -> str:
    scheme, _, rest = url.partition("://")
    if "@" not in rest:
        return url
    return f"{scheme}://****@{rest.rsplit('@', 1)[1]}"


def get_redis_client() -> redis.Redis:
    """Shared Redis client, pinged once when first created"""
    global redis_client

    if not config.REDIS_ENABLED:
        raise RuntimeError("Redis is disabled (REDIS_ENABLED=false)")

    if redis_client is None:
        url = redis_url()
        logger.info(f"🔄 Connecting to Redis at {mask_url(url)}")
        client = redis.from_url(
            url,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
            retry_on_timeout=True,
            health_check_interval=30,
            max_connections=20,
        )
        try:
            client.ping()
        except redis.RedisError as e:
            logger.error(f"❌ Failed to connect to Redis: {e}")
            raise
        redis_client = client
        logger.info("✅ Redis connected")

    return redis_client


@dataclass
class Window:
    count: int
    resets_at: int
    synced_at: int

    def seconds_left(self, now: int) -> int:
        return max(0, self.resets_at - now)


class AttemptCounter:
    """Fixed-window attempt counts keyed by string"""

    def __init__(self):
        self._windows: dict[str, Window] = {}
        self._lock = Lock()
        self._pruned_at = 0

    def clear(self) -> None:
        with self._lock:
            self._windows.clear()

    def _prune(self, now: int) -> None:
        if now - self._pruned_at < PRUNE_INTERVAL_SECONDS:
            return
        expired = [key for key, window in self._windows.items() if now >= window.resets_at]
        for key in expired:
            del self._windows[key]
        self._pruned_at = now

    def _load(self, key: str, window_seconds: int, client: redis.Redis, now: int) -> Window:
        """Pick up a window another worker already started, or open a new one"""
        try:
            stored, ttl = client.get(key), client.ttl(key)
        except redis.RedisError as e:
            logger.warning(f"⚠️ Could not read {key} from Redis, counting locally: {e}")
            stored, ttl = None, -2

        if stored and ttl > 0:
            return Window(count=int(stored), resets_at=now + ttl, synced_at=now)
        return Window(count=0, resets_at=now + window_seconds, synced_at=0)

    def _sync(self, key: str, window: Window, client: redis.Redis, now: int) -> None:
        try:
            client.set(key, window.count, ex=max(1, window.seconds_left(now)))
            window.synced_at = now
        except redis.RedisError as e:
            logger.warning(f"⚠️ Could not write {key} to Redis: {e}")

    def hit(self, key: str, limit: int, window_seconds: int, client: redis.Redis) -> tuple[bool, int, int]:
        """Count one attempt.

        Returns (allowed, attempts used in the window, seconds until it resets).
        A refused attempt is not counted.
        """
        now = int(time.time())
        with self._lock:
            self._prune(now)
            window = self._windows.get(key)
            if window is None:
                window = self._windows[key] = self._load(key, window_seconds, client, now)
            elif now >= window.resets_at:
                window = self._windows[key] = Window(count=0, resets_at=now + window_seconds, synced_at=0)

            allowed = window.count < limit
            if allowed:
                window.count += 1
            if now - window.synced_at >= SYNC_INTERVAL_SECONDS:
                self._sync(key, window, client, now)

            return allowed, window.count, window.seconds_left(now)


attempts = AttemptCounter()


def client_ip(request: Request) -> str:
    """Peer address of the request.

    X-Forwarded-For is client controlled, so it is read only when
    TRUST_PROXY_HEADERS is set, and then only the hop our proxy appended.
    """
    if config.TRUST_PROXY_HEADERS:
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            return forwarded.split(",")[-1].strip()
    return request.client.host if request.client else "unknown"


class RateLimit:
    """
    Attempts allowed per window for one group of endpoints

    Used as a dependency it counts by client IP. Handlers also call
    `check_phone` once the body is parsed, so rotating IPs does not buy
    more guesses at one number.

        login_limit = RateLimit("auth_login", limit=10, window_seconds=600)

        @router.post("/login")
        async def login(data: PhoneRequest, _: None = Depends(login_limit)):
            login_limit.check_phone(data.phone_number)
    """

    def __init__(self, name: str, limit: int, window_seconds: int):
        self.name = name
        self.limit = limit
        self.window_seconds = window_seconds

    def _check(self, subject: str) -> None:
        if not config.REDIS_ENABLED:
            return

        try:
            client = get_redis_client()
        except Exception as e:
            logger.error(f"❌ Rate limiting unavailable, refusing request: {e}")
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Rate limiting service temporarily unavailable",
            ) from e

        key = f"rate_limit:{self.name}:{subject}"
        allowed, used, retry_after = attempts.hit(key, self.limit, self.window_seconds, client)
        if not allowed:
            logger.warning(f"🚫 Rate limit reached for {key} ({used}/{self.limit})")
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail={
                    "message": f"Too many attempts. Please try again in {retry_after} seconds.",
                    "retry_after": retry_after,
                    "limit": self.limit,
                    "window_seconds": self.window_seconds,
                },
                headers={"Retry-After": str(retry_after)},
            )

    async def __call__(self, request: Request) -> None:
        self._check(f"ip:{client_ip(request)}")

    def check_phone(self, phone_number: str) -> None:
        self._check(f"phone:{phone_number}")
