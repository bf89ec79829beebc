from typing import List, Optional
from app.domain.models import Movie
from app.repositories.interface.movie_repository import MovieRepository


class MovieService:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository


    async def list_movies(self) -> List[Movie]:
        return await self.movie_repository.get_all_movies()


    async def get_movie(self, movie_id: int) -> Optional[Movie]:
        return await self.movie_repository.get_by_id(movie_id)


    async def create_movie(self, movie: Movie) -> None:
        await self.movie_repository.add(movie)
