from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from app.config.environment import DATABASE_URL

class Base(DeclarativeBase):
    pass

SQLALCHEMY_DATABASE_URL = DATABASE_URL

engine = create_async_engine(SQLALCHEMY_DATABASE_URL)

SessionLocal = async_sessionmaker(bind=engine, class_=AsyncSession, autoflush=False, expire_on_commit=False)

async def get_db():
    async with SessionLocal() as db:
        yield db
