"""Supabase client factory for the expense store.

The sync endpoint is called by a phone agent, not a signed-in user, so the
store writes with the service-role key rather than a per-user JWT.
"""
from supabase import create_client, Client

from apps.api.core.config import Settings


def get_supabase_client(settings: Settings) -> Client:
    """Create a service-role Supabase client from settings."""
    if not settings.supabase_enabled:
        raise RuntimeError("Supabase environment variables are not configured")

    return create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_KEY)
