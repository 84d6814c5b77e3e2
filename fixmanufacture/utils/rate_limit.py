from typing import Any, Dict
from fastapi import HTTPException, Request, Response
from fastapi_limiter import FastAPILimiter
from fastapi_limiter.depends import RateLimiter
import hashlib
import os
import time


def _key_from_request(req: Request) -> str:
    # Priorité: jeton Bearer (hashé) puis IP
    auth = req.headers.get("Authorization") or ""
    path = req.url.path
    if auth:
        h = hashlib.sha256(auth.encode("utf-8")).hexdigest()[:16]
        return f"user:{h}:{path}"
    ip = req.client.host if req.client else "local"
    return f"ip:{ip}:{path}"


def optional_rate_limit(times: int, seconds: int):
    async def _identifier(req: Request) -> str:
        return _key_from_request(req)

    async def _dep(request: Request, response: Response):
        # Fallback mémoire (dev/tests) si demandé
        if os.getenv("LOCAL_RATE_LIMIT_FALLBACK") == "1":
            now = time.time()
            key = _key_from_request(request)
            store = getattr(request.app.state, "_rl_store", {})
            hits = [t for t in store.get(key, []) if now - t < seconds]
            if len(hits) >= times:
                raise HTTPException(status_code=429, detail="Too Many Requests")
            hits.append(now)
            store[key] = hits
            request.app.state._rl_store = store
            return

        # Limiteur désactivé ou non initialisé (Redis indisponible): pas de limitation
        if getattr(request.app.state, "rate_limit_enabled", False) is not True:
            return
        if getattr(FastAPILimiter, "redis", None) is None:
            return

        await RateLimiter(times=times, seconds=seconds, identifier=_identifier)(request, response)

    return _dep


def rate_limit_health_info(request: Request) -> Dict[str, Any]:
    enabled = getattr(request.app.state, "rate_limit_enabled", None)
    ready = getattr(FastAPILimiter, "redis", None) is not None
    return {
        "enabled": (bool(enabled) if enabled is not None else None),
        "ready": ready,
        "backend": "redis" if ready else None,
    }
