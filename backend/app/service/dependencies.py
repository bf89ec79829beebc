from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config.settings import AppSettings, get_app_settings
from app.db.database import get_db
from app.handlers.movie_handler import MovieHandler
from app.mappers import DtoMovieMapper, MovieMapper
from app.repositories import SQLAlchemyMovieRepo
from app.service.movie_service import MovieService

def get_movie_service(db: AsyncSession = Depends(get_db)) -> MovieService:
    return MovieService(SQLAlchemyMovieRepo(db))

def get_movie_mapper() -> MovieMapper:
    return DtoMovieMapper()

def get_movie_handler(
    movie_service: MovieService = Depends(get_movie_service),
    movie_mapper: MovieMapper = Depends(get_movie_mapper),
    settings: AppSettings = Depends(get_app_settings)
) -> MovieHandler:
    return MovieHandler(movie_service, movie_mapper, settings)
