"""Application service (use case) for filing and tracking support requests."""

import logging
from dataclasses import dataclass

from warranty_manager.application.interfaces import (
    ClientProfileRepository,
    ProductRepository,
    SupportRequestRepository,
)
from warranty_manager.application.schemas import SupportRequestCreate, SupportRequestUpdate
from warranty_manager.domain.entities import SupportRequest
from warranty_manager.domain.exceptions import EntityNotFoundError

from .projection_service import ProjectionService
from .support_email import SupportEmail, SupportEmailComposer

logger = logging.getLogger(__name__)


@dataclass
class SupportRequestReceipt:
    support_request: SupportRequest
    email: SupportEmail
    email_sent: bool = True


class SupportRequestService:
    """Files warranty claims: compose the e-mail, "send" it, record the request.

    E-mail dispatch is simulated by logging the message; the request is
    stored directly in the ``sent`` state.
    """

    def __init__(
        self,
        support_request_repo: SupportRequestRepository,
        product_repo: ProductRepository,
        profile_repo: ClientProfileRepository,
        projections: ProjectionService,
        composer: SupportEmailComposer,
    ) -> None:
        self._repository = support_request_repo
        self._product_repo = product_repo
        self._profile_repo = profile_repo
        self._projections = projections
        self._composer = composer

    async def get_request(self, request_id: str) -> SupportRequest:
        request = await self._repository.get_by_id(request_id)
        if request is None:
            raise EntityNotFoundError("SupportRequest", request_id)
        return request

    async def list_for_product(self, product_id: str) -> list[SupportRequest]:
        return await self._repository.get_by_product(product_id)

    async def file_request(
        self, data: SupportRequestCreate, owner_id: str
    ) -> SupportRequestReceipt:
        product = await self._product_repo.get_by_id(data.product_id)
        projected = await self._projections.with_brand(product) if product else None
        if projected is None:
            raise EntityNotFoundError("Product", data.product_id)

        profile = await self._profile_repo.get_by_owner(owner_id)
        email = self._composer.compose(
            projected.product,
            projected.brand,
            issue_description=data.issue_description,
            category=data.category,
            severity=data.severity,
            profile=profile,
        )
        logger.info(
            "Warranty claim e-mail to=%s subject=%r\n%s", email.to, email.subject, email.body
        )

        request = SupportRequest(
            product_id=data.product_id,
            issue_description=data.issue_description,
            category=data.category,
            severity=data.severity,
        )
        request.mark_sent()
        created = await self._repository.create(request)
        return SupportRequestReceipt(support_request=created, email=email)

    async def update_request(
        self, request_id: str, data: SupportRequestUpdate
    ) -> SupportRequest:
        request = await self.get_request(request_id)
        request.update(**data.model_dump(exclude_unset=True))
        updated = await self._repository.update(request)
        if updated is None:
            raise EntityNotFoundError("SupportRequest", request_id)
        return updated
