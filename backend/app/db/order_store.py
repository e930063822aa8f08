"""
Order store — persisted order configurations in Redis.

Each order is one flat JSON document under ``order:{session_id}`` with a
sliding TTL, refreshed on every save.
Version: 1.0.0
"""

import logging
from typing import Optional

import redis
from fastapi import HTTPException
from pydantic import ValidationError as PydanticValidationError

from app.core.config import Settings, settings as default_settings
from app.core.exceptions import OrderNotFoundError
from app.schemas.orders import OrderConfiguration

logger = logging.getLogger("order_store")

REDIS_KEY_PREFIX = "order"


class OrderStore:
    def __init__(
        self,
        redis_client: Optional[redis.Redis] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._settings = settings or default_settings
        self._redis = redis_client or redis.Redis.from_url(
            self._settings.redis_url, decode_responses=True,
        )
        self._ttl = self._settings.order_ttl_seconds

    @staticmethod
    def _key(session_id: str) -> str:
        return f"{REDIS_KEY_PREFIX}:{session_id}"

    async def save(self, session_id: str, order: OrderConfiguration) -> None:
        try:
            self._redis.set(self._key(session_id), order.model_dump_json(), ex=self._ttl)
        except redis.RedisError as e:
            logger.info("redis error op=save session=%s detail=%s", session_id, str(e))
            raise HTTPException(status_code=503, detail=f"Order storage unavailable: {e}")

    async def load(self, session_id: str) -> OrderConfiguration:
        try:
            raw = self._redis.get(self._key(session_id))
        except redis.RedisError as e:
            logger.info("redis error op=load session=%s detail=%s", session_id, str(e))
            raise HTTPException(status_code=503, detail=f"Order storage unavailable: {e}")

        if raw is None:
            raise OrderNotFoundError(f"No order stored for session '{session_id}'")
        try:
            return OrderConfiguration.model_validate_json(raw)
        except PydanticValidationError as e:
            logger.warning("discarding unreadable order session=%s detail=%s", session_id, str(e))
            try:
                self._redis.delete(self._key(session_id))
            except redis.RedisError as redis_err:
                logger.info("redis error op=delete session=%s detail=%s", session_id, str(redis_err))
            raise OrderNotFoundError(f"No order stored for session '{session_id}'")

    async def delete(self, session_id: str) -> bool:
        try:
            return bool(self._redis.delete(self._key(session_id)))
        except redis.RedisError as e:
            logger.info("redis error op=delete session=%s detail=%s", session_id, str(e))
            raise HTTPException(status_code=503, detail=f"Order storage unavailable: {e}")
