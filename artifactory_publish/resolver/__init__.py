"""Parameter resolver for the publish step.

Public API:
    resolve_params(config, workspace) -> UploadDescriptor
"""

from artifactory_publish.resolver.params import (
    DETAILS_MISSING_MESSAGE,
    URL_MISSING_MESSAGE,
    coerce_bool,
    resolve_params,
    split_patterns,
)

__all__ = [
    "DETAILS_MISSING_MESSAGE",
    "URL_MISSING_MESSAGE",
    "coerce_bool",
    "resolve_params",
    "split_patterns",
]
