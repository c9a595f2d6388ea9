from contextlib import asynccontextmanager
import logging

from app.core.config.scoring import get_scoring_value
from app.scoring.sections import PASSING_SCORE, SECTION_MAX_SCORES

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    # Fail at startup rather than on the first keyword request.
    max_keywords = get_scoring_value("keywords.max_keywords")
    configured_pass = get_scoring_value("scoring.passing_score", PASSING_SCORE)
    if configured_pass != PASSING_SCORE:
        logger.warning(
            "scoring_config_passing_score_ignored configured=%s effective=%s",
            configured_pass,
            PASSING_SCORE,
        )
    logger.info(
        "ats_engine_ready sections=%s total_points=%s passing=%s max_keywords=%s",
        len(SECTION_MAX_SCORES),
        sum(SECTION_MAX_SCORES.values()),
        PASSING_SCORE,
        max_keywords,
    )
    yield
    logger.info("ats_engine_shutdown")
