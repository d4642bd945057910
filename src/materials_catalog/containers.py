"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from materials_catalog.adapters.supabase_category_repository import (
    SupabaseCategoryRepository,
)
from materials_catalog.adapters.supabase_object_store import SupabaseObjectStore
from materials_catalog.adapters.supabase_product_repository import (
    SupabaseProductRepository,
)
from materials_catalog.adapters.supabase_user_repository import SupabaseUserRepository
from materials_catalog.config import Settings
from materials_catalog.services.auth import AuthGate, SessionTokens
from materials_catalog.services.categories import CategoryService
from materials_catalog.services.media import MediaService
from materials_catalog.services.products import ProductService
from materials_catalog.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    auth_gate: AuthGate
    category_service: CategoryService
    product_service: ProductService
    media_service: MediaService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_service = UserService(SupabaseUserRepository(supabase_client))
    auth_gate = AuthGate(
        user_service=user_service,
        tokens=SessionTokens(
            secret=resolved_settings.session_secret,
            max_age_seconds=resolved_settings.session_max_age_seconds,
        ),
    )
    media_service = MediaService(
        object_store=SupabaseObjectStore(
            supabase_client, bucket=resolved_settings.storage_bucket
        ),
        max_upload_bytes=resolved_settings.max_upload_bytes,
        signed_url_expires_seconds=resolved_settings.signed_url_expires_seconds,
    )
    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        auth_gate=auth_gate,
        category_service=CategoryService(SupabaseCategoryRepository(supabase_client)),
        product_service=ProductService(SupabaseProductRepository(supabase_client)),
        media_service=media_service,
    )
