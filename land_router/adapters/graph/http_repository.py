"""HTTP country repository adapter.

Downloads the public ``countries.json`` dataset and maps it to country
records. Transport and decoding failures surface as CountryDataError.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import requests

from ...config import CountryDataConfig, get_config
from ...domain.errors import CountryDataError
from ...domain.models import CountryRecord
from .countries_json import CachingCountryRepository, parse_countries


@dataclass
class HttpCountryRepository(CachingCountryRepository):
    """Country repository backed by a remote JSON document.

    This adapter implements CountryRepositoryPort.

    Attributes:
        config: Data source configuration (URL, timeout)
        session: HTTP session used for the download
    """

    config: CountryDataConfig = field(default_factory=lambda: get_config().data)
    session: requests.Session = field(default_factory=requests.Session, repr=False)

    def fetch(self) -> List[CountryRecord]:
        """Download and parse the country dataset.

        Returns:
            Country records in source order.

        Raises:
            CountryDataError: On transport errors, a non-200 status or an
                undecodable body.
        """
        url = self.config.data_url
        self._logger.debug("Fetching country data", extra={"url": url})

        try:
            response = self.session.get(url, timeout=self.config.timeout_seconds)
        except requests.RequestException as e:
            raise CountryDataError(
                "Failed to fetch country data",
                source=url,
                cause=e,
            )

        if response.status_code != 200:
            raise CountryDataError(
                f"Unexpected HTTP status: {response.status_code}",
                source=url,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise CountryDataError(
                "Country data is not valid JSON",
                source=url,
                cause=e,
            )

        records = parse_countries(payload, source=url)
        self._logger.info(
            "Country data fetched",
            extra={"url": url, "records": len(records)},
        )
        return records
