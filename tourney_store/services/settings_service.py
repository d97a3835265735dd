import logging

from tourney_store.models import AppSettings, StoreState

logger = logging.getLogger(__name__)


def set_settings(state: StoreState, app_settings: AppSettings) -> StoreState:
    # Whole-record replacement, no field merging or range checks
    logger.info("App settings replaced")
    return state.model_copy(update={"settings": app_settings})
