# region Docstring
"""
docvcs.config.factory
Settings base class and cached loader shared by the docvcs settings classes.
Overview:
- The storage engine is configured without code changes: an operator points
    DOCVCS_DB_PATH or DOCVCS_DATA_DIR somewhere else through the environment, a .env
    file or config.yaml next to the working directory.
- Library callers and tests build settings objects explicitly; whatever they pass
    wins over every file or environment source, so an in-memory database requested
    by a caller is never replaced by an operator default.
Contents:
- Classes:
    - FactoryBaseSettings:
        Configuration Priority (highest to lowest):
            1. Init kwargs (explicit StorageSettings(db_path=...) and the like)
            2. Environment variables (DOCVCS_*, ENVIRONMENT)
            3. .env file values
            4. config.{env}.yaml for the detected environment
            5. config.yaml
            6. Field defaults
- Functions:
    - get_settings(settings_cls: Type[T]) -> T:
        One cached instance per settings class, used by KeyValueStore, IdentityProvider
        and configure_logging when no settings are passed. Call
        get_settings.cache_clear() after changing the environment.
"""
# endregion
# region Imports
from functools import lru_cache
from typing import Type, TypeVar

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from .base import APP_ENV, APP_ROOT

# endregion
# region FactoryBaseSettings Class
T = TypeVar("T", bound=BaseSettings)


class FactoryBaseSettings(BaseSettings):
    """
    BaseSettings reading DOCVCS_* variables, .env and YAML files under APP_ROOT.
    Priority: Init kwargs > Env Vars > .env > YAML (Env specific) > YAML (Default) > Defaults
    """

    model_config = SettingsConfigDict(
        env_file=APP_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:

        # config.{env}.yaml overrides config.yaml
        yaml_settings = YamlConfigSettingsSource(
            settings_cls,
            yaml_file=[APP_ROOT / "config.yaml", APP_ROOT / f"config.{APP_ENV}.yaml"],
        )
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            yaml_settings,
        )


# endregion
# region get_settings Factory Function


@lru_cache
def get_settings(settings_cls: Type[T]) -> T:
    """
    Cached settings instance for a docvcs settings class.
    """
    return settings_cls()


# endregion
