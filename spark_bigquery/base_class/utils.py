from collections.abc import Mapping
from typing import Dict, List

from spark_bigquery.base_class.bigquery_config import BigQueryConfig
from spark_bigquery.exceptions import BigQueryConfigError
import yaml
import logging
import glob


def parse_bigquery_config(parameters) -> BigQueryConfig:
    config = BigQueryConfig.from_parameters(parameters)
    logging.info(f"Config is {config}")

    return config


def flatten_parameters(raw_config, prefix="") -> Dict[str, str]:
    """
    Flattens a nested mapping into dotted option keys, e.g. {"bq": {"project": "p"}} -> {"bq.project": "p"}.
    Empty values are dropped so that they fall back to their defaults.
    """
    parameters = {}
    for key, value in raw_config.items():
        name = f"{prefix}{key}"
        if isinstance(value, Mapping):
            parameters.update(flatten_parameters(value, prefix=f"{name}."))
        elif value is not None:
            parameters[name] = str(value)

    return parameters


def load_bigquery_config(config_path) -> BigQueryConfig:
    with open(config_path, "r") as f:
        raw_config = yaml.safe_load(f)

    if not isinstance(raw_config, Mapping):
        raise BigQueryConfigError(
            f"Configuration file {config_path} must contain a mapping of options",
            details={"path": str(config_path)},
        )

    return parse_bigquery_config(flatten_parameters(raw_config))


def load_bigquery_configs_from_dir(dir_path) -> List[BigQueryConfig]:
    files = sorted(glob.glob(f"{dir_path}/*.yaml"))
    logging.info(f"Loading config from  {files}")
    return list(map(load_bigquery_config, files))
