import pytest

from urikit import URI


@pytest.fixture
def uri():
    """Fixture providing a URI with a nested path and a query string."""
    return URI("https://example.com/dir/sub/file.php?page=1")


@pytest.fixture
def tracked_uri():
    """Fixture providing a URI carrying tracking parameters."""
    return URI("https://example.com/?utm_source=s&utm_medium=m&page=1")
