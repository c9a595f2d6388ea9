import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import app.main  # noqa: F401
from app.core.config.scoring import get_scoring_value
from app.services.ats_service import calculate_ats_score, match_job_description_keywords


class PipelineSmokeTests(unittest.TestCase):
    def test_safe_imports_and_scoring_config_lookup(self):
        self.assertEqual(get_scoring_value("scoring.passing_score"), 70)

    def test_entry_points_run_end_to_end(self):
        result = calculate_ats_score({"summary": "Led a team of 5 engineers"})
        self.assertGreaterEqual(result.overall, 0)
        self.assertEqual(match_job_description_keywords({}, "fastapi pydantic")[0].keyword, "fastapi")


if __name__ == "__main__":
    unittest.main()
