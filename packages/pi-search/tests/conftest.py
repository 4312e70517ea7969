import pytest

SAMPLE_CATALOG = """\
[redirects.moodle]
url = "https://moodle.example.org"
description = "Learning platform"
aliases = ["lms"]

[redirects.mail]
url = "https://mail.example.org"
description = "Webmail"

[redirects.campus]
url = "https://campus.example.org"
description = "Course registration"
aliases = ["co"]
"""


@pytest.fixture
def catalog_text():
    return SAMPLE_CATALOG


@pytest.fixture
def catalog_file(tmp_path):
    """Write the sample catalog to a temporary redirects.toml."""
    path = tmp_path / "redirects.toml"
    path.write_text(SAMPLE_CATALOG)
    return path
