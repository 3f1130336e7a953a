"""Application service (use case) for product reviews."""

from warranty_manager.application.interfaces import ProductRepository, ReviewRepository
from warranty_manager.application.schemas import ReviewCreate
from warranty_manager.domain.entities import Review
from warranty_manager.domain.exceptions import EntityNotFoundError


class ReviewService:

    def __init__(self, repository: ReviewRepository, product_repo: ProductRepository):
        self._repository = repository
        self._product_repo = product_repo

    async def get_review(self, review_id: str) -> Review:
        review = await self._repository.get_by_id(review_id)
        if review is None:
            raise EntityNotFoundError("Review", review_id)
        return review

    async def list_for_product(self, product_id: str) -> list[Review]:
        return await self._repository.get_by_product(product_id)

    async def create_review(self, data: ReviewCreate) -> Review:
        if await self._product_repo.get_by_id(data.product_id) is None:
            raise EntityNotFoundError("Product", data.product_id)
        review = Review(
            product_id=data.product_id,
            rating=data.rating,
            title=data.title,
            content=data.content,
            pros=list(data.pros),
            cons=list(data.cons),
            recommend=data.recommend,
        )
        return await self._repository.create(review)
