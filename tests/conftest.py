"""Root conftest - shared test configuration."""

import os

# Tests never reach the public search endpoint
os.environ.setdefault(
    "OPENDATASOFT_BASE_URL", "https://opendatasoft.test/api/records/1.0/search/",
)
os.environ.setdefault("LOG_FORMAT", "text")
