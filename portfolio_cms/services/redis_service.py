"""Redis service for caching, token blacklisting and login throttling"""

import redis.asyncio as redis
from typing import Optional
from portfolio_cms.config import settings

LOGIN_ATTEMPT_WINDOW_SECONDS = 900


class RedisService:
    """Service for Redis operations shared by auth and the site-settings cache"""

    _client: Optional[redis.Redis] = None

    @classmethod
    async def get_client(cls) -> redis.Redis:
        """Get or create Redis client"""
        if cls._client is None:
            cls._client = redis.from_url(
                settings.redis_url,
                encoding="utf-8",
                decode_responses=True
            )
        return cls._client

    @classmethod
    async def close(cls):
        """Close Redis connection"""
        if cls._client:
            await cls._client.aclose()
            cls._client = None

    async def ping(self) -> bool:
        client = await self.get_client()
        return await client.ping()

    async def blacklist_token(self, token: str, expiration_seconds: int):
        """
        Add a token to the blacklist

        Args:
            token: JWT token to blacklist
            expiration_seconds: How long to keep the entry (the token's remaining lifetime)
        """
        if expiration_seconds <= 0:
            return
        client = await self.get_client()
        await client.setex(f"blacklist:{token}", expiration_seconds, "1")

    async def is_token_blacklisted(self, token: str) -> bool:
        client = await self.get_client()
        result = await client.get(f"blacklist:{token}")
        return result is not None

    async def increment_login_attempts(self, ip_address: str) -> int:
        """
        Increment failed login attempts for an IP address

        Returns:
            Current number of attempts within the window
        """
        client = await self.get_client()
        key = f"login_attempts:{ip_address}"
        count = await client.incr(key)

        # Window starts at the first failure
        if count == 1:
            await client.expire(key, LOGIN_ATTEMPT_WINDOW_SECONDS)

        return count

    async def reset_login_attempts(self, ip_address: str):
        client = await self.get_client()
        await client.delete(f"login_attempts:{ip_address}")

    async def get_login_attempts(self, ip_address: str) -> int:
        client = await self.get_client()
        result = await client.get(f"login_attempts:{ip_address}")
        return int(result) if result else 0

    async def set_cache(self, key: str, value: str, expiration: int = 3600):
        """
        Set a cache value

        Args:
            key: Cache key
            value: Value to cache
            expiration: Expiration time in seconds (default 1 hour)
        """
        client = await self.get_client()
        await client.setex(key, expiration, value)

    async def get_cache(self, key: str) -> Optional[str]:
        client = await self.get_client()
        return await client.get(key)

    async def delete_cache(self, key: str):
        client = await self.get_client()
        await client.delete(key)
