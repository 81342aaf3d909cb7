from supabase import create_client, Client
from mandram.config import settings


class SupabaseNotConfigured(RuntimeError):
    """Raised when the Supabase URL or key is missing from the environment."""


class SupabaseClient:
    _client: Client = None
    _service_client: Client = None

    @classmethod
    def get_client(cls) -> Client:
        if cls._client is None:
            if not settings.supabase_url or not settings.supabase_key:
                raise SupabaseNotConfigured("Missing Supabase env variables")
            cls._client = create_client(settings.supabase_url, settings.supabase_key)
        return cls._client

    @classmethod
    def get_service_client(cls) -> Client:
        """Client with service_role key when configured; falls back to the anon client."""
        if cls._service_client is None and settings.supabase_service_role_key:
            if not settings.supabase_url:
                raise SupabaseNotConfigured("Missing Supabase env variables")
            cls._service_client = create_client(
                settings.supabase_url, settings.supabase_service_role_key
            )
        return cls._service_client or cls.get_client()

    @classmethod
    def reset_client(cls):
        cls._client = None
        cls._service_client = None


def get_supabase() -> Client:
    return SupabaseClient.get_client()


def get_service_supabase() -> Client:
    return SupabaseClient.get_service_client()
