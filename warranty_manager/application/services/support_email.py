"""Composition of the warranty-claim e-mail sent to a manufacturer."""

from dataclasses import dataclass
from datetime import date

from warranty_manager.domain.entities import (
    Brand,
    ClientProfile,
    IssueCategory,
    IssueSeverity,
    Product,
)

_PT_MONTHS = (
    "janeiro", "fevereiro", "março", "abril", "maio", "junho",
    "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
)

_FALLBACK_SIGNATURE = "[Cliente Warranty Manager]"


@dataclass(frozen=True)
class SupportEmail:
    to: str
    subject: str
    body: str


def format_long_date(value: date) -> str:
    """Format a date the pt-PT long way, e.g. ``15 de janeiro de 2023``."""
    return f"{value.day} de {_PT_MONTHS[value.month - 1]} de {value.year}"


class SupportEmailComposer:
    """Renders the support request e-mail for a product's brand.

    The recipient is the brand's support address for ``country_code``,
    falling back to its main support e-mail.
    """

    def __init__(self, country_code: str | None = None):
        self._country_code = country_code

    def compose(
        self,
        product: Product,
        brand: Brand,
        *,
        issue_description: str,
        category: IssueCategory,
        severity: IssueSeverity,
        profile: ClientProfile | None = None,
    ) -> SupportEmail:
        lines = [
            "Exmo(a) Senhor(a),",
            "",
            "Venho por este meio solicitar assistência técnica para o seguinte produto:",
            "",
        ]

        if profile is not None:
            address = f"{profile.address}, {profile.city} {profile.postal_code or ''}".rstrip()
            lines += [
                "DADOS DO CLIENTE:",
                f"- Nome: {profile.full_name}",
                f"- Email: {profile.email}",
                f"- Contacto: {profile.phone_number}",
                f"- NIF/Contribuinte: {profile.tax_number or 'N/A'}",
                f"- Morada: {address}",
                "",
            ]

        lines += [
            "INFORMAÇÃO DO PRODUTO:",
            f"- Produto: {product.name}",
            f"- Marca: {brand.name}",
            f"- Modelo: {product.model}",
        ]
        if product.serial_number:
            lines.append(f"- Número de Série: {product.serial_number}")
        lines += [
            f"- Data de Compra: {format_long_date(product.purchase_date)}",
            "",
            "DESCRIÇÃO DO PROBLEMA:",
            f"Categoria: {IssueCategory(category).value}",
            f"Severidade: {IssueSeverity(severity).value}",
            "",
            issue_description,
            "",
        ]
        if product.receipt_url:
            lines += ["Anexo: Talão de compra em anexo", ""]

        lines += [
            "Agradeço a vossa atenção e aguardo retorno.",
            "",
            "Com os melhores cumprimentos,",
            profile.full_name if profile is not None else _FALLBACK_SIGNATURE,
        ]

        return SupportEmail(
            to=brand.support_email_for(self._country_code),
            subject=f"Pedido de Assistência - {product.name} ({product.model})",
            body="\n".join(lines).strip(),
        )
