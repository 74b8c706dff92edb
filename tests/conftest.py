import logfire
import pytest

from cssbuilder import css_selector_builder


@pytest.fixture
def builder():
    return css_selector_builder


@pytest.fixture
def sample_html():
    return """
    <!DOCTYPE html>
    <html>
    <head>
        <title>Test Page</title>
    </head>
    <body>
        <div id="main" class="container draggable">
            <a href="/logo.png">Logo</a>
            <a href="/about">About</a>
        </div>
        <table id="data">
            <tr><td>1</td><td>2</td></tr>
            <tr><td>3</td><td>4</td></tr>
        </table>
        <p class="empty"></p>
    </body>
    </html>
    """


@pytest.fixture
def isolated_project(tmp_path, monkeypatch):
    """Run with cwd inside a throwaway project so .cssbuilder/ lands in tmp_path."""
    (tmp_path / 'pyproject.toml').touch()
    monkeypatch.chdir(tmp_path)
    for name in ('CSSBUILDER_LOG_LEVEL', 'CSSBUILDER_LOG_TO_FILE', 'LOGFIRE_TOKEN'):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line('markers', 'integration: marks tests as integration tests')
    config.addinivalue_line('markers', 'unit: marks tests as unit tests')

    logfire.configure(send_to_logfire=False, console=False)


def pytest_collection_modifyitems(config, items):
    """Apply directory-based marks to collected test items."""

    for item in items:
        if hasattr(item, 'fspath'):
            file_path = str(item.fspath)

            if '/tests/integration/' in file_path:
                item.add_marker(pytest.mark.integration)
            elif '/tests/unit/' in file_path:
                item.add_marker(pytest.mark.unit)
