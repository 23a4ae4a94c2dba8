import os
import pytest


@pytest.fixture(scope="session")
def config_dir():
    here = os.path.abspath(os.path.dirname(__file__))

    return os.path.join(here, "config")


@pytest.fixture
def required_parameters():
    return {
        "bq.project": "proj1",
        "bq.staging_dataset.location": "EU",
        "bq.staging_dataset.gcs_bucket": "my-bucket",
    }
