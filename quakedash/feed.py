"""
Handles the outbound read of the USGS earthquake geoJSON feed.
"""

import logging
from dataclasses import asdict
from typing import Any, Dict

import pandas as pd
import requests

from .config import FEED_URL, REQUEST_TIMEOUT
from .models import OBSERVATION_COLUMNS, Observation

logger = logging.getLogger(__name__)


class FeedError(RuntimeError):
    """The feed could not be fetched or did not have the expected shape."""


def empty_observations() -> pd.DataFrame:
    """Return an empty record set with the Observation columns."""
    return pd.DataFrame(columns=OBSERVATION_COLUMNS)


def fetch_feed(url: str = FEED_URL, timeout: float = REQUEST_TIMEOUT) -> Dict[str, Any]:
    """GET the feed document and decode it as JSON."""
    logger.info("Fetching earthquake feed from %s", url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        return response.json()
    except requests.RequestException as exc:
        raise FeedError(f"Could not fetch feed {url}: {exc}") from exc
    except ValueError as exc:
        raise FeedError(f"Feed {url} did not return valid JSON: {exc}") from exc


def parse_features(payload: Dict[str, Any]) -> pd.DataFrame:
    """
    Normalize a feature collection into a flat record set.

    Parameters
    ----------
    payload : dict
        Decoded geoJSON document with a ``features`` list.

    Returns
    -------
    pd.DataFrame
        One row per feature, columns ``OBSERVATION_COLUMNS``, in feed order.
        Features repeating an earlier ``id`` are dropped.
    """
    try:
        features = payload["features"]
        records = [asdict(Observation.from_feature(f)) for f in features]
    except (KeyError, IndexError, TypeError, ValueError) as exc:
        raise FeedError(f"Malformed feed feature: {exc!r}") from exc

    if not records:
        return empty_observations()

    df = pd.DataFrame(records, columns=OBSERVATION_COLUMNS)
    duplicated = df["id"].duplicated(keep="first")
    if duplicated.any():
        logger.warning(
            "Dropping %d feature(s) with duplicate ids: %s",
            int(duplicated.sum()),
            ", ".join(df.loc[duplicated, "id"].unique()[:5]),
        )
        df = df.loc[~duplicated].reset_index(drop=True)
    return df


def load_observations(
    url: str = FEED_URL, timeout: float = REQUEST_TIMEOUT
) -> pd.DataFrame:
    """Main entry point: fetch the feed and return its normalized records."""
    df = parse_features(fetch_feed(url, timeout=timeout))
    logger.info("Loaded %d observations", len(df))
    return df
