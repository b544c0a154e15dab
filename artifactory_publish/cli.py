"""Command-line entry point for the Artifactory publish step.

Examples
--------
Publish the artifacts described by a pipeline step's settings::

    export PLUGIN_URL=https://repo.example.com
    export PLUGIN_USERNAME=ci PLUGIN_PASSWORD=secret
    export PLUGIN_POM=pom.xml PLUGIN_FILES="target/*.jar"
    artifactory-publish --workspace "$(pwd)"
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import cyclopts
from pydantic import ValidationError

from artifactory_publish.core.config import PluginSettings, get_settings
from artifactory_publish.core.logging import configure_logging
from artifactory_publish.errors import PublishError
from artifactory_publish.pipeline import publish

logger = logging.getLogger(__name__)

app = cyclopts.App(help="Publish build artifacts to Artifactory from PLUGIN_* settings.")


def _load_settings() -> Optional[PluginSettings]:
    try:
        return get_settings()
    except (ValidationError, PublishError) as exc:
        configure_logging()
        logger.error("Invalid plugin settings: %s", exc)
        return None


@app.default
def main(
    *,
    workspace: Optional[Path] = None,
    log_level: Optional[str] = None,
) -> int:
    """Resolve, expand and upload the configured artifacts.

    Parameters
    ----------
    workspace:
        Root for manifests and file patterns. Defaults to DRONE_WORKSPACE,
        then the current directory.
    log_level:
        Overrides PLUGIN_LOG_LEVEL (debug, info, warn, error).
    """
    settings = _load_settings()
    if settings is None:
        return 1

    try:
        configure_logging(log_level or settings.log_level, settings.log_json)
    except PublishError as exc:
        configure_logging()
        logger.error("%s", exc.message)
        return 1

    root = workspace or Path(settings.workspace or Path.cwd())
    try:
        report = asyncio.run(publish(settings.to_config(), root))
    except PublishError as exc:
        logger.error("%s", exc.message)
        return 1

    print(
        f"Published {len(report.created)} artifact(s) to {settings.url}",
        file=sys.stderr,
    )
    return 0


def run() -> None:
    sys.exit(app())


if __name__ == "__main__":
    run()
