"""HTTP client construction for the Artifactory REST API.

Auth precedence:
  access_token          -> Authorization: Bearer
  username AND password -> HTTP Basic
  api_key               -> X-JFrog-Art-Api
  none of the above     -> anonymous

TLS verification is on by default. A custom CA comes from pem_file_path
or, inline, from pem_file_contents; an existing pem_file_path file wins
when both are set. insecure disables verification entirely.
"""

import logging
import ssl
from pathlib import Path
from typing import Optional, Union

import httpx

from artifactory_publish.errors import ConfigurationError
from artifactory_publish.types import UploadDescriptor

logger = logging.getLogger(__name__)

# Per-request timeout; large artifacts need more than httpx's 5s default.
UPLOAD_TIMEOUT = 300

API_KEY_HEADER = "X-JFrog-Art-Api"


def build_auth(descriptor: UploadDescriptor) -> tuple[Optional[httpx.Auth], dict[str, str]]:
    """Return (auth, extra headers) for the configured credentials."""
    if descriptor.access_token:
        return None, {"Authorization": f"Bearer {descriptor.access_token}"}
    if descriptor.username and descriptor.password:
        return httpx.BasicAuth(descriptor.username, descriptor.password), {}
    if descriptor.api_key:
        return None, {API_KEY_HEADER: descriptor.api_key}
    if descriptor.username:
        logger.warning("Username %s has no password; ignoring it", descriptor.username)
    return None, {}


def _ca_context(descriptor: UploadDescriptor) -> ssl.SSLContext:
    pem_file_path = descriptor.pem_file_path
    use_file = pem_file_path and (
        not descriptor.pem_file_contents or Path(pem_file_path).is_file()
    )
    try:
        if use_file:
            return ssl.create_default_context(cafile=pem_file_path)
        return ssl.create_default_context(cadata=descriptor.pem_file_contents)
    except (OSError, ssl.SSLError, ValueError) as exc:
        source = pem_file_path if use_file else "pem_file_contents"
        raise ConfigurationError(f"Cannot load CA bundle {source}: {exc}") from exc


def build_verify(descriptor: UploadDescriptor) -> Union[bool, ssl.SSLContext]:
    if descriptor.insecure:
        logger.warning("TLS certificate verification is disabled")
        return False
    if descriptor.pem_file_path or descriptor.pem_file_contents:
        return _ca_context(descriptor)
    return True


def build_client(descriptor: UploadDescriptor) -> httpx.AsyncClient:
    """Create the AsyncClient used for every HEAD/PUT of a run."""
    auth, headers = build_auth(descriptor)
    if descriptor.is_anonymous:
        logger.info("No credentials configured, uploading anonymously")
    return httpx.AsyncClient(
        auth=auth,
        headers=headers,
        verify=build_verify(descriptor),
        timeout=UPLOAD_TIMEOUT,
    )
