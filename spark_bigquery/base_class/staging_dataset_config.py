from typing import ClassVar, Optional

from google.cloud.bigquery.dataset import Dataset
from pydantic import field_validator
from pydantic.dataclasses import dataclass

from spark_bigquery.base_class.config_keys import StagingDatasetDefaults, StagingDatasetKeys


@dataclass(frozen=True)
class StagingDatasetConfig:
    """
    BigQuery staging dataset configuration. A staging dataset is used to temporarily store the results of SQL queries.

    Attributes:
        location: Geographic location where the dataset should reside, e.g. "EU" or "US".
            See https://cloud.google.com/bigquery/docs/dataset-locations
        gcs_bucket: Google Cloud Storage (GCS) bucket used for temporary files when importing through
            BigQuery load jobs and exporting through BigQuery extraction jobs.
        name: Name of the staging dataset
        lifetime: Default table lifetime in milliseconds. Tables are deleted once the lifetime has been reached.
        service_account_key_file: Optional service account key file used to authenticate with Google Cloud Storage.
            Ambient credentials are used when not provided.
    """
    DESCRIPTION: ClassVar[str] = "Spark BigQuery staging dataset"

    location: str
    gcs_bucket: str
    name: str = StagingDatasetDefaults.NAME
    lifetime: int = StagingDatasetDefaults.LIFETIME
    service_account_key_file: Optional[str] = None

    @field_validator("name")
    def valid_name(cls, v):
        assert v, f"{StagingDatasetKeys.NAME} must not be empty"
        return v

    @field_validator("location")
    def valid_location(cls, v):
        assert v, f"{StagingDatasetKeys.LOCATION} must not be empty"
        return v

    @field_validator("lifetime")
    def valid_lifetime(cls, v):
        assert v >= 0, f"{StagingDatasetKeys.LIFETIME} must be a non-negative number of milliseconds"
        return v

    @field_validator("gcs_bucket")
    def valid_gcs_bucket(cls, v):
        assert v, f"{StagingDatasetKeys.GCS_BUCKET} must not be empty"
        return v

    def to_dataset(self, project: str) -> Dataset:
        """Dataset resource describing the staging dataset in the given project. Nothing is created."""
        dataset_reference = {
            "datasetReference": {
                "datasetId": self.name,
                "projectId": project
            },
            "location": self.location,
            "defaultTableExpirationMs": str(self.lifetime),
            "description": self.DESCRIPTION
        }

        return Dataset.from_api_repr(dataset_reference)
