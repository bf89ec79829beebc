from sqlalchemy import select
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from app.db.models import MovieORM
from app.domain.models import Movie
from app.repositories.interface.movie_repository import MovieRepository
from app.exceptions.repository import (
    ConnectionException,
    RepositoryOperationException,
    InvalidEntityDataException
)


class SQLAlchemyMovieRepo(MovieRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, movie_orm: MovieORM) -> Movie:
        if not movie_orm.title:
            raise InvalidEntityDataException(f"Failed to convert movie data: movie {movie_orm.id} has no title")
        return Movie(
            id=movie_orm.id,
            title=movie_orm.title,
            description=movie_orm.description or "",
            release_date=movie_orm.release_date
        )

    def _to_orm(self, movie: Movie) -> MovieORM:
        return MovieORM(
            id=movie.id,
            title=movie.title,
            description=movie.description,
            release_date=movie.release_date
        )

    async def get_all_movies(self) -> List[Movie]:
        try:
            result = await self.session.execute(select(MovieORM).order_by(MovieORM.id))
            return [self._to_domain(movie_orm) for movie_orm in result.scalars().all()]
        except InvalidEntityDataException:
            raise
        except OperationalError as e:
            raise ConnectionException(f"Failed to get all movies: {str(e)}")
        except Exception as e:
            raise RepositoryOperationException(f"Failed to get all movies: {str(e)}")

    async def get_by_id(self, movie_id: int) -> Optional[Movie]:
        if not isinstance(movie_id, int):
            raise RepositoryOperationException(f"Invalid movie_id type. Expected int, got {type(movie_id)}")
        try:
            movie_orm = await self.session.get(MovieORM, movie_id)
            if not movie_orm:
                return None
            return self._to_domain(movie_orm)
        except InvalidEntityDataException:
            raise
        except OperationalError as e:
            raise ConnectionException(f"Failed to get movie by ID: {str(e)}")
        except Exception as e:
            raise RepositoryOperationException(f"Failed to get movie by ID: {str(e)}")

    async def add(self, movie: Movie) -> None:
        try:
            movie_orm = self._to_orm(movie)
            self.session.add(movie_orm)
            await self.session.flush()
            movie.id = movie_orm.id
            await self.session.commit()
        except OperationalError as e:
            await self.session.rollback()
            raise ConnectionException(f"Failed to add movie: {str(e)}")
        except Exception as e:
            await self.session.rollback()
            raise RepositoryOperationException(f"Failed to add movie: {str(e)}")
