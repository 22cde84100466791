"""JSON file country repository adapter.

Reads a local copy of ``countries.json``, for offline use and tests.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import List

from ...config import CountryDataConfig, get_config
from ...domain.errors import ConfigurationError, CountryDataError
from ...domain.models import CountryRecord
from .countries_json import CachingCountryRepository, parse_countries


@dataclass
class JsonFileCountryRepository(CachingCountryRepository):
    """Country repository backed by a local JSON file.

    Attributes:
        config: Data source configuration (``data_file`` must be set)
    """

    config: CountryDataConfig = field(default_factory=lambda: get_config().data)

    def fetch(self) -> List[CountryRecord]:
        """Read and parse the country dataset from disk.

        Raises:
            ConfigurationError: If no data file is configured.
            CountryDataError: If the file cannot be read or decoded.
        """
        path = self.config.data_file
        if path is None:
            raise ConfigurationError(
                "No country data file configured",
                setting_name="LAND_ROUTER_DATA_DATA_FILE",
                expected_type="path",
            )

        try:
            with path.open(encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, ValueError) as e:
            raise CountryDataError(
                f"Failed to read country data: {e}",
                source=str(path),
                cause=e,
            )

        records = parse_countries(payload, source=str(path))
        self._logger.info(
            "Country data read",
            extra={"path": str(path), "records": len(records)},
        )
        return records
