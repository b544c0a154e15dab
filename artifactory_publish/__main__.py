from artifactory_publish.cli import run

run()
