"""Initial brand catalogue, inserted on startup when the brands table is empty."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from warranty_manager.domain.entities import Brand
from warranty_manager.infrastructure.database.repositories import SQLAlchemyBrandRepository

logger = logging.getLogger(__name__)

DEFAULT_BRANDS: list[dict[str, str]] = [
    {
        "name": "Apple",
        "support_email": "support@apple.com",
        "support_phone": "+1-800-692-7753",
        "website": "https://www.apple.com/support/",
        "category": "Informática",
    },
    {
        "name": "Samsung",
        "support_email": "support@samsung.com",
        "support_phone": "+351-808-207-267",
        "website": "https://www.samsung.com/pt/support/",
        "category": "Eletrodomésticos",
    },
    {
        "name": "LG",
        "support_email": "apoio.cliente@lge.com",
        "support_phone": "+351-707-505-454",
        "website": "https://www.lg.com/pt/support",
        "category": "Eletrodomésticos",
    },
    {
        "name": "Sony",
        "support_email": "info@sony.pt",
        "support_phone": "+351-707-780-785",
        "website": "https://www.sony.pt/support",
        "category": "Televisão e Áudio",
    },
    {
        "name": "Bosch",
        "support_email": "bosch-pt@bshg.com",
        "support_phone": "+351-214-250-730",
        "website": "https://www.bosch-home.pt/servico",
        "category": "Eletrodomésticos",
    },
    {
        "name": "Siemens",
        "support_email": "siemens-pt@bshg.com",
        "support_phone": "+351-214-250-700",
        "website": "https://www.siemens-home.bsh-group.com/pt/",
        "category": "Eletrodomésticos",
    },
    {
        "name": "Microsoft",
        "support_email": "support@microsoft.com",
        "support_phone": "+351-21-366-5100",
        "website": "https://support.microsoft.com/",
        "category": "Informática",
    },
    {
        "name": "Dell",
        "support_email": "tech_support@dell.com",
        "support_phone": "+351-707-788-788",
        "website": "https://www.dell.com/support/",
        "category": "Informática",
    },
    {
        "name": "HP",
        "support_email": "support@hp.com",
        "support_phone": "+351-707-222-000",
        "website": "https://support.hp.com/",
        "category": "Informática",
    },
    {
        "name": "Xiaomi",
        "support_email": "service.pt@xiaomi.com",
        "support_phone": "+351-308-810-456",
        "website": "https://www.mi.com/pt/service/",
        "category": "Telefones",
    },
    {
        "name": "Teka",
        "support_email": "servico.cliente@teka.pt",
        "support_phone": "+351-256-200-100",
        "website": "https://www.teka.pt/servico-tecnico/",
        "category": "Eletrodomésticos",
    },
    {
        "name": "Ariston",
        "support_email": "info@ariston.pt",
        "support_phone": "+351-213-180-900",
        "website": "https://www.ariston.com/pt-PT/",
        "category": "Eletrodomésticos",
    },
    {
        "name": "AEG",
        "support_email": "rma.pt@eletrolux.com",
        "support_phone": "+351-210-304-261",
        "website": "https://www.aeg.pt/",
        "category": "Eletrodomésticos",
    },
]


async def seed_brands(session: AsyncSession) -> int:
    """Insert the default brands if none exist. Returns the number inserted.

    Idempotent: safe to call on every startup.
    """
    repository = SQLAlchemyBrandRepository(session)
    if await repository.get_all():
        logger.debug("Brands already present, skipping seed")
        return 0

    for data in DEFAULT_BRANDS:
        await repository.create(Brand(**data))
    logger.info("Seeded %d default brands", len(DEFAULT_BRANDS))
    return len(DEFAULT_BRANDS)
