"""FastAPI application wiring."""

import logging

from dotenv import load_dotenv
from fastapi import FastAPI

from api.actions import create_invoice_actions_router
from api.data import create_data_router
from api.errors import register_error_handlers
from clients.postgres_client import PostgresClient
from clients.valkey_client import ValkeyClient
from clients.vault_client import get_database_url, get_valkey_url
from core.config import InvoicingConfig
from core.page_cache import PageCache
from core.services.invoice_service import InvoiceService

logger = logging.getLogger(__name__)


def create_app(
    invoice_service: InvoiceService,
    page_cache: PageCache,
    config: InvoicingConfig,
) -> FastAPI:
    """App with error handlers, the invoices listing and the form actions."""
    app = FastAPI(title="Invoices")
    register_error_handlers(app)

    app.include_router(create_data_router(invoice_service, page_cache, config))
    app.include_router(create_invoice_actions_router(invoice_service, page_cache, config))

    return app


def build_app(config: InvoicingConfig | None = None) -> FastAPI:
    """
    Production entry point: secrets from Vault, real Postgres and Valkey.

    Vault credentials (VAULT_ADDR, VAULT_ROLE_ID, VAULT_SECRET_ID) are read
    from the environment, with a .env file taking effect if present.
    """
    load_dotenv()
    config = config or InvoicingConfig()

    postgres = PostgresClient(
        get_database_url(),
        min_connections=config.db_min_connections,
        max_connections=config.db_max_connections,
    )
    valkey = ValkeyClient(get_valkey_url())
    logger.info("Invoices app configured for %s", config.invoices_path)

    return create_app(
        InvoiceService(postgres),
        PageCache(valkey, ttl_seconds=config.page_cache_ttl_seconds),
        config,
    )
