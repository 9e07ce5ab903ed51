import logging

from supabase import Client, SupabaseException, create_client

from ..config import StoreSettings
from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def build_supabase_client(settings: StoreSettings) -> Client:
    """Return a new Supabase client for ``settings``.

    The key is chosen from the configured access level. There is no module
    level cache: the caller owns the client and its lifetime.
    """

    key = settings.api_key()
    try:
        client = create_client(settings.url, key)
    except SupabaseException as exc:
        logger.exception("Failed to initialise Supabase client")
        raise ConfigurationError(f"Invalid Supabase configuration: {exc}") from exc
    logger.info(
        "Supabase client created for %s (%s access)",
        settings.url,
        settings.access_level.value,
    )
    return client
