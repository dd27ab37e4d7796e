"""Invoicing service configuration."""

from pydantic import BaseModel, Field, model_validator


class InvoicingConfig(BaseModel):
    """
    Invoicing configuration.

    Secrets (database and Valkey URLs) are not configured here; they are
    read from Vault by clients.vault_client.
    """

    # Routing
    invoices_path: str = Field(
        default="/dashboard/invoices",
        description="Invoices listing path; form actions redirect here after a write",
        pattern=r"^/",
    )

    # Page cache
    page_cache_ttl_seconds: int = Field(
        default=300,
        description="How long a rendered listing stays cached without a write",
        ge=1,
        le=86400,
    )
    listing_limit: int = Field(
        default=100,
        description="Maximum invoices returned by the listing",
        ge=1,
        le=1000,
    )

    # Database pool
    db_min_connections: int = Field(default=1, ge=1, le=20)
    db_max_connections: int = Field(default=10, ge=1, le=100)

    # Deleting is switched off until the delete flow is confirmed.
    invoice_delete_enabled: bool = Field(
        default=False,
        description="Run the delete statement instead of failing the request",
    )

    @model_validator(mode="after")
    def _check_pool_bounds(self) -> "InvoicingConfig":
        if self.db_min_connections > self.db_max_connections:
            raise ValueError("db_min_connections cannot exceed db_max_connections")
        return self
