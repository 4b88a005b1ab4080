from fastapi import Header, HTTPException

from config import settings


async def verify_api_secret(
    x_api_secret: str | None = Header(default=None),
) -> None:
    if settings.API_SECRET is None:
        return
    if x_api_secret != settings.API_SECRET:
        raise HTTPException(status_code=401, detail="Invalid API secret")
