"""Build the initial dashboard state from the feed.

The feed is read once per session.  A failed read does not raise into the
UI: it is logged and turned into a state in the ``"error"`` status so the
page can show a banner instead of staying silently empty.
"""

import logging

from .config import FEED_URL, REQUEST_TIMEOUT
from .feed import FeedError, load_observations
from .state import DashboardState

logger = logging.getLogger(__name__)


def load_state(
    url: str = FEED_URL, timeout: float = REQUEST_TIMEOUT
) -> DashboardState:
    """
    Load the feed and wrap it in a fresh :class:`DashboardState`.

    Parameters
    ----------
    url : str, optional
        Feed location; defaults to ``FEED_URL``.
    timeout : float, optional
        Request timeout in seconds.

    Returns
    -------
    DashboardState
        ``"loaded"`` (or ``"empty"`` for a feed without features) on
        success, ``"error"`` carrying the failure message otherwise.
    """
    state = DashboardState()
    try:
        observations = load_observations(url, timeout=timeout)
    except FeedError as exc:
        logger.exception("Earthquake feed unavailable: %s", exc)
        return state.with_error(str(exc))
    return state.with_observations(observations)
