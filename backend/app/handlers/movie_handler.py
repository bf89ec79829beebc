import hmac
import logging
from typing import Optional

from app.config.settings import AppSettings
from app.domain.models import Movie
from app.domain.outcomes import BadRequest, Created, NotFound, Ok, Outcome, Unauthorized
from app.mappers.interface.movie_mapper import MovieMapper
from app.service.movie_service import MovieService

logger = logging.getLogger(__name__)

NO_MOVIES_FOUND = "No movies found"
MOVIE_NOT_FOUND = "Movie not found"
MOVIE_REQUIRED = "Movie data is required"
INVALID_API_KEY = "Invalid API Key"


class MovieHandler:
    """
    Decides the outcome of each movie request.

    Absence, missing input and a rejected key become outcomes here. Anything
    raised by the service or the mapper is left to the caller.
    """

    def __init__(self, movie_service: MovieService, movie_mapper: MovieMapper, settings: AppSettings):
        self.movie_service = movie_service
        self.movie_mapper = movie_mapper
        self.settings = settings

    async def list_movies(self) -> Outcome:
        movies = await self.movie_service.list_movies()
        # an empty catalog is reported as absence, not as an empty list
        if not movies:
            return NotFound(NO_MOVIES_FOUND)
        return Ok(self.movie_mapper.to_transport_list(movies))

    async def get_movie(self, movie_id: int) -> Outcome:
        movie = await self.movie_service.get_movie(movie_id)
        if movie is None:
            return NotFound(MOVIE_NOT_FOUND)
        return Ok(self.movie_mapper.to_transport(movie))

    async def create_movie(self, movie: Optional[Movie], api_key: Optional[str]) -> Outcome:
        if movie is None:
            logger.warning("Rejected movie creation: no movie data supplied")
            return BadRequest(MOVIE_REQUIRED)

        if not self._is_valid_key(api_key):
            logger.warning("Rejected movie creation: invalid API key")
            return Unauthorized(INVALID_API_KEY)

        await self.movie_service.create_movie(movie)
        logger.info(f"Created movie {movie.id} ({movie.title})")

        return Created(
            action="get_movie",
            route_values={"id": movie.id},
            payload=self.movie_mapper.to_transport(movie)
        )

    def _is_valid_key(self, api_key: Optional[str]) -> bool:
        if api_key is None:
            return False
        # exact, case-sensitive match
        return hmac.compare_digest(api_key.encode("utf-8"), self.settings.api_secret_key.encode("utf-8"))
