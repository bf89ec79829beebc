import pytest
from datetime import date
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.db.database import Base
from app.db.models import MovieORM
from app.domain.models import Movie
from app.repositories.implementation.sql_alchemy_movie_repo import SQLAlchemyMovieRepo
from app.exceptions.repository import (
    RepositoryOperationException,
    InvalidEntityDataException
)


@pytest.fixture
async def session():
    """Create a fresh in-memory SQLite database for each test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    TestingSessionLocal = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    async with TestingSessionLocal() as db:
        yield db
    await engine.dispose()


@pytest.fixture
def movie_repo(session):
    """Create a movie repository instance."""
    return SQLAlchemyMovieRepo(session)


@pytest.fixture
async def test_movies(session):
    """Create test movies in the database."""
    movies = [
        MovieORM(
            id=1,
            title="Inception",
            description="Sci-Fi Thriller",
            release_date=date(2010, 7, 16)
        ),
        MovieORM(
            id=2,
            title="Titanic",
            description="Romance",
            release_date=date(1997, 12, 19)
        )
    ]
    session.add_all(movies)
    await session.commit()
    return movies


@pytest.mark.anyio
async def test_get_by_id_existing_movie(movie_repo, test_movies):
    """Test retrieving an existing movie by ID."""
    movie = await movie_repo.get_by_id(1)
    assert movie is not None
    assert movie.id == 1
    assert movie.title == "Inception"
    assert movie.description == "Sci-Fi Thriller"
    assert movie.release_date == date(2010, 7, 16)


@pytest.mark.anyio
async def test_get_by_id_non_existent_movie(movie_repo):
    """Test retrieving a non-existent movie by ID."""
    assert await movie_repo.get_by_id(999) is None


@pytest.mark.anyio
async def test_get_by_id_invalid_input(movie_repo):
    """Test handling of invalid input in get_by_id."""
    with pytest.raises(RepositoryOperationException):
        await movie_repo.get_by_id("invalid_id")  # Passing string instead of int


@pytest.mark.anyio
async def test_get_all_movies_ordered_by_id(movie_repo, test_movies):
    """Test retrieving all movies when movies exist."""
    movies = await movie_repo.get_all_movies()
    assert [m.id for m in movies] == [1, 2]
    assert [m.title for m in movies] == ["Inception", "Titanic"]


@pytest.mark.anyio
async def test_get_all_movies_empty_db(movie_repo):
    """Test retrieving all movies from an empty database."""
    movies = await movie_repo.get_all_movies()
    assert movies == []
    assert isinstance(movies, list)


@pytest.mark.anyio
async def test_add_assigns_id(movie_repo, test_movies):
    """Test that adding a movie sets the generated id on the domain object."""
    movie = Movie(title="Arrival", description="Linguistics", release_date=date(2016, 11, 11))

    await movie_repo.add(movie)

    assert movie.id == 3
    stored = await movie_repo.get_by_id(3)
    assert stored.title == "Arrival"
    assert stored.release_date == date(2016, 11, 11)


@pytest.mark.anyio
async def test_add_duplicate_id_fails(movie_repo, test_movies):
    """Test that a primary key clash is reported and the session stays usable."""
    movie = Movie(id=1, title="Inception again", description="", release_date=date(2010, 7, 16))

    with pytest.raises(RepositoryOperationException, match="Failed to add movie"):
        await movie_repo.add(movie)

    movies = await movie_repo.get_all_movies()
    assert len(movies) == 2


@pytest.mark.anyio
async def test_missing_title_is_invalid(session, movie_repo):
    """Rows without a title cannot become domain movies."""
    session.add(MovieORM(id=5, title="", description="x", release_date=date(2000, 1, 1)))
    await session.commit()

    with pytest.raises(InvalidEntityDataException) as exc_info:
        await movie_repo.get_by_id(5)
    assert "Failed to convert movie data" in str(exc_info.value)


@pytest.mark.anyio
async def test_convert_domain_to_orm(movie_repo):
    """Test converting a domain model to ORM."""
    movie = Movie(
        title="Inception",
        description="Sci-Fi Thriller",
        release_date=date(2010, 7, 16),
        id=3
    )

    movie_orm = movie_repo._to_orm(movie)

    assert movie_orm.id == 3
    assert movie_orm.title == "Inception"
    assert movie_orm.release_date == date(2010, 7, 16)
