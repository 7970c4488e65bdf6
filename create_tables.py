import asyncio
from app.db.database import engine
from app.db.base import Base
import app.models  # noqa: F401  registers every table on Base.metadata


async def create_all():
    async with engine.begin() as conn:
        # Start from an empty schema
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

if __name__ == "__main__":
    asyncio.run(create_all())
    print("Tables created: " + ", ".join(sorted(Base.metadata.tables)))
