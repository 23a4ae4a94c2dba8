from google.cloud.bigquery.job import QueryJobConfig
from pydantic.dataclasses import dataclass

from spark_bigquery.base_class.config_keys import JobDefaults
from spark_bigquery.enums.job_priority import JobPriority


@dataclass(frozen=True)
class JobConfig:
    """
    BigQuery job configuration options.

    Attributes:
        priority: Job priority when executing SQL queries. INTERACTIVE (the default) runs the query as soon as
            possible, BATCH queues it. See https://cloud.google.com/bigquery/quota-policy
    """
    priority: JobPriority = JobDefaults.PRIORITY

    def to_query_job_config(self) -> QueryJobConfig:
        return QueryJobConfig(priority=self.priority.value)
