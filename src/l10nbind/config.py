"""Configuration for the loader, the binding layer, and the Localizer.

Provides frozen dataclasses that encapsulate every tunable parameter.
Constructing any of them with no arguments produces a usable configuration;
values are validated at construction time.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from l10nbind.constants import (
    ATTRIBUTE_WHITELIST,
    DEFAULT_ARGS_ATTRIBUTE,
    DEFAULT_FETCH_TIMEOUT,
    DEFAULT_KEY_ATTRIBUTE,
    MAX_REDIRECT_DEPTH,
    RESOURCE_MEDIA_TYPE,
)
from l10nbind.enums import TargetProperty

__all__ = ["BindingConfig", "LoaderConfig", "LocalizerConfig"]


@dataclass(frozen=True, slots=True)
class LoaderConfig:
    """Immutable configuration for ResourceLoader.

    Attributes:
        fetch_timeout: Seconds allowed for a single resource fetch
            (default: 5.0). Expiry fails the whole load with FetchError.
        max_redirect_depth: Maximum redirect hops followed for one locale
            within one resource chain (default: 16).

    Example:
        >>> config = LoaderConfig(fetch_timeout=2.5)
        >>> config.max_redirect_depth
        16
    """

    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    max_redirect_depth: int = MAX_REDIRECT_DEPTH

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If fetch_timeout or max_redirect_depth is not positive
        """
        if self.fetch_timeout <= 0:
            msg = "fetch_timeout must be positive"
            raise ValueError(msg)
        if self.max_redirect_depth <= 0:
            msg = "max_redirect_depth must be positive"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class BindingConfig:
    """Immutable configuration for the binding layer.

    Attributes:
        key_attribute: Marker attribute holding the translation key.
        args_attribute: Attribute holding the JSON argument object.
        attribute_whitelist: Key suffixes that redirect the write target.
            Must be a subset of the TargetProperty values; narrowing it
            disables the removed targets.
    """

    key_attribute: str = DEFAULT_KEY_ATTRIBUTE
    args_attribute: str = DEFAULT_ARGS_ATTRIBUTE
    attribute_whitelist: frozenset[str] = ATTRIBUTE_WHITELIST

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If an attribute name is empty or the whitelist names
                an unsupported target
        """
        if not self.key_attribute or not self.args_attribute:
            msg = "key_attribute and args_attribute must be non-empty"
            raise ValueError(msg)
        if self.key_attribute == self.args_attribute:
            msg = "key_attribute and args_attribute must differ"
            raise ValueError(msg)
        supported = {target.value for target in TargetProperty}
        unknown = set(self.attribute_whitelist) - supported
        if unknown:
            msg = f"Unsupported whitelist targets: {sorted(unknown)}"
            raise ValueError(msg)
        object.__setattr__(self, "attribute_whitelist", frozenset(self.attribute_whitelist))


@dataclass(frozen=True, slots=True)
class LocalizerConfig:
    """Immutable top-level configuration for Localizer.

    Attributes:
        loader: Loader configuration (timeouts, redirect depth)
        binding: Markup contract configuration
        resource_media_type: <link type> value identifying resource declarations
    """

    loader: LoaderConfig = field(default_factory=LoaderConfig)
    binding: BindingConfig = field(default_factory=BindingConfig)
    resource_media_type: str = RESOURCE_MEDIA_TYPE

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If resource_media_type is empty
        """
        if not self.resource_media_type:
            msg = "resource_media_type must be non-empty"
            raise ValueError(msg)
