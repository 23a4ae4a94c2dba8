import logging
from dataclasses import field
from functools import partial
from typing import Dict, Mapping

import dacite
from dacite.exceptions import MissingValueError, WrongTypeError
from pydantic import ValidationError, field_validator
from pydantic.dataclasses import dataclass

from spark_bigquery.base_class.config_keys import (
    ALL_KEYS,
    FIELD_KEYS,
    BigQueryKeys,
    JobKeys,
    StagingDatasetKeys,
)
from spark_bigquery.base_class.job_config import JobConfig
from spark_bigquery.base_class.staging_dataset_config import StagingDatasetConfig
from spark_bigquery.common.utils.coercion import parse_enum, parse_long
from spark_bigquery.enums.job_priority import JobPriority
from spark_bigquery.exceptions import InvalidConfigValue, MissingRequiredKey

# Option values that are not plain strings
coercions = {
    StagingDatasetKeys.LIFETIME: parse_long,
    JobKeys.PRIORITY: partial(parse_enum, enum_class=JobPriority),
}

# Attribute path prefix of each config class within BigQueryConfig
class_paths = {
    "BigQueryConfig": "",
    "StagingDatasetConfig": "staging_dataset.",
    "JobConfig": "job.",
}


@dataclass(frozen=True)
class BigQueryConfig:
    """
    BigQuery configuration.

    Attributes:
        project: BigQuery billing project ID
        staging_dataset: Staging dataset configuration. See :class:`spark_bigquery.base_class.staging_dataset_config.StagingDatasetConfig`.
        job: Job configuration. See :class:`spark_bigquery.base_class.job_config.JobConfig`.
    """
    project: str
    staging_dataset: StagingDatasetConfig
    job: JobConfig = field(default_factory=JobConfig)

    @field_validator("project")
    def valid_project(cls, v):
        assert v, f"{BigQueryKeys.PROJECT} must not be empty"
        return v

    @classmethod
    def from_parameters(cls, parameters: Mapping[str, str]) -> "BigQueryConfig":
        """
        Builds the configuration from the flat option map of the data source.

        Raises:
            MissingRequiredKey: bq.project, bq.staging_dataset.location or bq.staging_dataset.gcs_bucket is absent
            InvalidIntegerValue: bq.staging_dataset.lifetime is not a base-10 integer
            InvalidEnumValue: bq.job.priority is neither INTERACTIVE nor BATCH
            InvalidConfigValue: a value was rejected by field validation, e.g. a negative lifetime
        """
        unknown_keys = sorted(
            key for key in parameters
            if key.startswith(BigQueryKeys.NAMESPACE) and key not in ALL_KEYS
        )
        if unknown_keys:
            logging.warning(f"Ignoring unrecognized BigQuery options: {unknown_keys}")

        data = {"staging_dataset": {}, "job": {}}
        for field_path, key in FIELD_KEYS.items():
            if key not in parameters:
                continue

            value = parameters[key]
            if key in coercions:
                value = coercions[key](key, value)

            *parents, name = field_path.split(".")
            target = data
            for parent in parents:
                target = target[parent]
            target[name] = value

        try:
            return dacite.from_dict(data_class=cls, data=data)
        except MissingValueError as e:
            raise MissingRequiredKey(FIELD_KEYS.get(e.field_path, e.field_path)) from e
        except WrongTypeError as e:
            raise InvalidConfigValue(
                FIELD_KEYS.get(e.field_path, e.field_path), e.value, f"expected a value of type {e.field_type}"
            ) from e
        except ValidationError as e:
            error = e.errors()[0]
            field_path = class_paths.get(e.title, "") + ".".join(str(loc) for loc in error["loc"])
            raise InvalidConfigValue(
                FIELD_KEYS.get(field_path, field_path), error.get("input"), error["msg"]
            ) from e

    def to_parameters(self) -> Dict[str, str]:
        """Renders the configuration back into the flat option map understood by from_parameters."""
        parameters = {
            BigQueryKeys.PROJECT: self.project,
            StagingDatasetKeys.NAME: self.staging_dataset.name,
            StagingDatasetKeys.LOCATION: self.staging_dataset.location,
            StagingDatasetKeys.LIFETIME: str(self.staging_dataset.lifetime),
            StagingDatasetKeys.GCS_BUCKET: self.staging_dataset.gcs_bucket,
            JobKeys.PRIORITY: self.job.priority.value,
        }
        if self.staging_dataset.service_account_key_file is not None:
            parameters[StagingDatasetKeys.SERVICE_ACCOUNT_KEY_FILE] = self.staging_dataset.service_account_key_file

        return parameters
