from app.repositories.interface.movie_repository import MovieRepository
from app.repositories.implementation.sql_alchemy_movie_repo import SQLAlchemyMovieRepo

__all__ = ["MovieRepository", "SQLAlchemyMovieRepo"]
