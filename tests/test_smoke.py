"""Import smoke tests."""


def test_package_imports():
    import artifactory_publish

    assert callable(artifactory_publish.publish)
    assert callable(artifactory_publish.resolve_params)
    assert callable(artifactory_publish.expand_files)
    assert callable(artifactory_publish.upload)


def test_cli_app_registered():
    from artifactory_publish import cli

    assert callable(cli.main)
    assert callable(cli.run)
