"""
docvcs.stores.identity

Provides the single local user used for repository ownership and commit attribution.
"""

from logging import Logger as T_Logger
from typing import Optional

from pydantic import ValidationError

from docvcs.config import IdentitySettings, get_settings
from docvcs.constants import CollectionKey
from docvcs.logger import get_logger
from docvcs.models import User
from docvcs.storage import KeyValueStore


class IdentityProvider:
    """
    Returns the current user, creating and persisting it on first use.

    Attributes:
        __logger (Logger): The logger instance.
        __store (KeyValueStore): Backing store.
        __settings (IdentitySettings): Fallback identity.
    """

    __logger: T_Logger
    __store: KeyValueStore
    __settings: IdentitySettings

    def __init__(
        self,
        store: KeyValueStore,
        settings: Optional[IdentitySettings] = None,
        logger: Optional[T_Logger] = None,
    ) -> None:
        self.__store = store
        self.__settings = settings or get_settings(IdentitySettings)
        self.__logger = (
            logger.getChild(self.__class__.__name__)
            if logger
            else get_logger(self.__class__.__name__)
        )

    def fallback_user(self) -> User:
        """A fresh User built from the identity settings."""
        return User(
            id=self.__settings.user_id,
            email=self.__settings.user_email,
            name=self.__settings.user_name,
        )

    def get_current_user(self) -> User:
        """
        Return the persisted user, or create and persist the fallback identity.

        Without persistent storage a fresh fallback user is returned on each call.

        Returns:
            User: The current user.
        """
        if not self.__store.available:
            return self.fallback_user()

        key = CollectionKey.CURRENT_USER.value
        with self.__store.transaction():
            stored = self.__store.get_value(key)
            if stored is not None:
                try:
                    return User.from_record(stored)
                except ValidationError:
                    self.__logger.warning(
                        "Stored current user is invalid; replacing with fallback identity."
                    )
            user = self.fallback_user()
            self.__store.set_value(key, user.to_record())
            self.__logger.info(f"Created current user {user.email}")
            return user
