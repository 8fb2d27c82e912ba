"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from daily_diet.adapters.supabase_snack_repository import SupabaseSnackRepository
from daily_diet.adapters.supabase_user_repository import SupabaseUserRepository
from daily_diet.config import Settings
from daily_diet.services.snacks import SnackService
from daily_diet.services.summary import SummaryService
from daily_diet.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    snack_service: SnackService
    summary_service: SummaryService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    snack_repository = SupabaseSnackRepository(supabase_client)
    return AppContainer(
        settings=resolved_settings,
        user_service=UserService(user_repository),
        snack_service=SnackService(snack_repository),
        summary_service=SummaryService(snack_repository),
    )
