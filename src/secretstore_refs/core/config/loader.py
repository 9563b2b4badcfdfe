"""Load reference settings and resolution requests from HOCON via dataconf."""

from typing import TypeVar, cast

import dataconf

T = TypeVar("T")


def load_from_file(path: str, config_class: type[T]) -> T:
    """Read *path* as HOCON into *config_class*.

    Example:
        >>> request = load_from_file("request.conf", ResolutionRequest)
    """
    return cast(T, dataconf.file(path, config_class))


def load_from_string(hocon_str: str, config_class: type[T]) -> T:
    """Parse inline HOCON text into *config_class*.

    Handy for tests and for requests assembled in memory by a build agent.

    Example:
        >>> config = load_from_string('{ namespace_prefix: "secretstore." }', ReferenceConfig)
    """
    return cast(T, dataconf.string(hocon_str, config_class))


def load_from_env(prefix: str, config_class: type[T]) -> T:
    """Build *config_class* from environment variables starting with *prefix*.

    Args:
        prefix: Variable prefix, e.g. ``"SSR_"``; ``SSR_DELIMITER=@`` sets
            ``ReferenceConfig.delimiter``.
        config_class: Dataclass to populate.
    """
    return cast(T, dataconf.env(prefix, config_class))
