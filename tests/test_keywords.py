import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.schemas.resume import coerce_resume
from app.scoring.keywords import (
    DEFAULT_MAX_KEYWORDS,
    STOP_WORDS,
    extract_job_keywords,
    flatten_resume_text,
    match_keywords,
)
from tests.resume_samples import sample


class ExtractJobKeywordsTests(unittest.TestCase):
    def test_lowercases_and_dedupes_in_first_seen_order(self):
        self.assertEqual(
            extract_job_keywords("Python and Docker, PYTHON Terraform with docker"),
            ["python", "docker", "terraform"],
        )

    def test_keeps_technical_punctuation(self):
        tokens = extract_job_keywords("Experience with C++, C#, Node.js and CI/CD.")
        self.assertIn("c++", tokens)
        self.assertIn("node.js", tokens)
        self.assertNotIn("ci", tokens)

    def test_trims_trailing_dots_and_bullet_dashes(self):
        self.assertEqual(extract_job_keywords("- Kubernetes.\n-- Terraform-"), ["kubernetes", "terraform"])

    def test_drops_short_tokens_and_stop_words(self):
        tokens = extract_job_keywords("We need 5+ years of experience in Go, R and 2024 planning")
        self.assertEqual(tokens, ["2024", "planning"])
        for token in tokens:
            self.assertNotIn(token, STOP_WORDS)

    def test_keeps_numeric_identifiers(self):
        tokens = extract_job_keywords("SOC 2 Type II, Form 1099 and 401k reporting, ISO 27001")
        self.assertEqual(tokens, ["soc", "type", "form", "1099", "401k", "reporting", "iso", "27001"])

    def test_empty_or_stop_word_only_text(self):
        self.assertEqual(extract_job_keywords(""), [])
        self.assertEqual(extract_job_keywords("   "), [])
        self.assertEqual(extract_job_keywords("the and with for"), [])

    def test_cap_keeps_most_frequent_in_first_seen_order(self):
        text = "alpha beta gamma delta " + "delta " * 3 + "beta " * 2
        self.assertEqual(extract_job_keywords(text, max_keywords=2), ["beta", "delta"])

    def test_cap_never_reaches_fifty(self):
        text = " ".join(f"skill{idx}x" for idx in range(200))
        self.assertEqual(len(extract_job_keywords(text)), DEFAULT_MAX_KEYWORDS)
        self.assertLess(len(extract_job_keywords(text, max_keywords=500)), 50)


class FlattenResumeTextTests(unittest.TestCase):
    def test_projection_is_lowercase_and_excludes_contact_details(self):
        text = flatten_resume_text(coerce_resume(sample("tech")))
        self.assertEqual(text, text.lower())
        self.assertIn("apache kafka", text)
        self.assertIn("amazon web services", text)
        self.assertNotIn("sarah.chen@tech.com", text)


class MatchKeywordsTests(unittest.TestCase):
    def test_substring_containment(self):
        resume = coerce_resume({"summary": "Maintained Kubernetes clusters", "skills": {"core": ["PostgreSQL"]}})
        matches = match_keywords(resume, "Kubernetes Postgres Terraform")
        self.assertEqual(
            [(m.keyword, m.found) for m in matches],
            [("kubernetes", True), ("postgres", True), ("terraform", False)],
        )

    def test_no_stemming(self):
        resume = coerce_resume({"summary": "Built a data pipeline"})
        matches = match_keywords(resume, "pipelines")
        self.assertEqual([(m.keyword, m.found) for m in matches], [("pipelines", False)])

    def test_empty_resume_still_returns_keywords(self):
        matches = match_keywords(coerce_resume(None), "terraform ansible")
        self.assertEqual([m.found for m in matches], [False, False])


if __name__ == "__main__":
    unittest.main()
