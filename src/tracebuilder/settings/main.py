from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import SettingsConfigDict

from tracebuilder.common.exceptions import configuration_error
from .base import BuilderBaseSettings
from .traces import TraceSettings


class DatasourceSettings(BuilderBaseSettings):
    """Datasource-level defaults for the query builder.
    
    Environment variables use the ``TRACEBUILDER_`` prefix and ``__`` for
    nesting, e.g. ``TRACEBUILDER_TRACES__DEFAULT_TABLE=otel_traces``.
    """
    
    model_config = SettingsConfigDict(
        env_prefix="TRACEBUILDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__"
    )

    default_database: str = Field(
        default="default",
        description="Database selected for new queries"
    )
    default_table: str = Field(
        default="",
        description="Table selected for new queries"
    )
    traces: TraceSettings = Field(
        default_factory=TraceSettings,
        description="Trace query defaults"
    )
    max_reaction_passes: int = Field(
        default=16,
        ge=1,
        le=100,
        description="Upper bound on defaulting passes per input change before the session reports an update loop"
    )


# Singleton instance
_settings: Optional[DatasourceSettings] = None


def get_settings(force_reload: bool = False) -> DatasourceSettings:
    """Get the singleton settings instance for the application.
    
    Settings are loaded from the environment (and ``.env``) on first
    access and cached afterwards.
    
    Args:
        force_reload: If True, creates a new instance even if one already
                     exists. Useful for testing or when environment
                     variables have changed.
        
    Returns:
        DatasourceSettings: The singleton settings instance
        
    Raises:
        BuilderError: If the environment holds invalid configuration
    """
    global _settings
    
    if _settings is None or force_reload:
        try:
            _settings = DatasourceSettings()
        except ValidationError as e:
            raise configuration_error(
                f"Invalid tracebuilder configuration: {e.error_count()} error(s)",
                config_key=".".join(str(p) for p in e.errors()[0]["loc"]) if e.errors() else None,
                cause=e,
            ) from e
    
    return _settings


def reload_settings() -> DatasourceSettings:
    """Force reload of settings.
    
    This is primarily for testing purposes where you need to reset
    the singleton instance.
    """
    global _settings
    _settings = None
    return get_settings(force_reload=True)
