"""
Option keys understood by the BigQuery data source and the defaults applied when they are absent.

These keys are the public contract of the connector's option map: renaming one breaks every caller.
"""
from spark_bigquery.enums.job_priority import JobPriority


class BigQueryKeys:
    NAMESPACE = "bq."

    PROJECT = NAMESPACE + "project"


class StagingDatasetKeys:
    NAMESPACE = BigQueryKeys.NAMESPACE + "staging_dataset."

    NAME = NAMESPACE + "name"
    LOCATION = NAMESPACE + "location"
    LIFETIME = NAMESPACE + "lifetime"
    GCS_BUCKET = NAMESPACE + "gcs_bucket"
    SERVICE_ACCOUNT_KEY_FILE = NAMESPACE + "service_account_key_file"


class JobKeys:
    NAMESPACE = BigQueryKeys.NAMESPACE + "job."

    PRIORITY = NAMESPACE + "priority"


class StagingDatasetDefaults:
    NAME = "spark_staging"
    LIFETIME = 86400000  # 24 hours in milliseconds


class JobDefaults:
    PRIORITY = JobPriority.INTERACTIVE


# Attribute path within BigQueryConfig -> option key
FIELD_KEYS = {
    "project": BigQueryKeys.PROJECT,
    "staging_dataset.name": StagingDatasetKeys.NAME,
    "staging_dataset.location": StagingDatasetKeys.LOCATION,
    "staging_dataset.lifetime": StagingDatasetKeys.LIFETIME,
    "staging_dataset.gcs_bucket": StagingDatasetKeys.GCS_BUCKET,
    "staging_dataset.service_account_key_file": StagingDatasetKeys.SERVICE_ACCOUNT_KEY_FILE,
    "job.priority": JobKeys.PRIORITY,
}

ALL_KEYS = frozenset(FIELD_KEYS.values())
