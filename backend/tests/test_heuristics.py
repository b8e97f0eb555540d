import pytest

from models import EvidenceItem, VerdictLabel
from services.base import ReasoningSource
from services.heuristics import (
    NO_SOURCES_SUMMARY,
    UNVERIFIABLE_EXPLANATION,
    HeuristicReasoner,
    cite_evidence,
    match_rule,
)


def _evidence(*snippets):
    return [
        EvidenceItem(title=f"Source {i}", url=f"https://src.test/{i}", snippet=snippet)
        for i, snippet in enumerate(snippets)
    ]


class TestMatchRule:
    @pytest.mark.parametrize("snippet,verdict,confidence", [
        ("Researchers DEBUNKED this in 2021.", VerdictLabel.FALSE, 75),
        ("The viral post is a hoax.", VerdictLabel.FALSE, 75),
        ("Officials confirmed the figures.", VerdictLabel.TRUE, 80),
        ("The numbers were Verified by auditors.", VerdictLabel.TRUE, 80),
        ("The record is partially complete.", VerdictLabel.MIXED, 50),
        ("Whether it happened remains unclear.", VerdictLabel.MIXED, 50),
    ])
    def test_snippet_rules(self, snippet, verdict, confidence):
        rule = match_rule("A neutral statement", _evidence(snippet))
        assert rule.verdict == verdict
        assert rule.confidence == confidence

    @pytest.mark.parametrize("claim,verdict,confidence", [
        ("Scientists found water on Mars", VerdictLabel.MOSTLY_TRUE, 70),
        ("New research on sleep", VerdictLabel.MOSTLY_TRUE, 70),
        ("This miracle pill melts fat", VerdictLabel.MOSTLY_FALSE, 30),
        ("The SECRET they don't want you to know", VerdictLabel.MOSTLY_FALSE, 30),
        ("The city council met on Tuesday", VerdictLabel.UNVERIFIED, 20),
    ])
    def test_claim_rules(self, claim, verdict, confidence):
        rule = match_rule(claim, _evidence("Coverage of the topic."))
        assert rule.verdict == verdict
        assert rule.confidence == confidence

    def test_snippets_checked_before_claim(self):
        rule = match_rule("Scientists published a study", _evidence("This was debunked."))
        assert rule.verdict == VerdictLabel.FALSE
        assert rule.confidence == 75

    def test_debunk_outranks_verified(self):
        rule = match_rule("claim", _evidence("Confirmed by some.", "Later debunked by others."))
        assert rule.verdict == VerdictLabel.FALSE

    def test_scientific_outranks_sensational(self):
        rule = match_rule("Study reveals shocking cure", _evidence("Coverage."))
        assert rule.verdict == VerdictLabel.MOSTLY_TRUE

    def test_substring_matching(self):
        # "untrue" contains "true"
        rule = match_rule("claim", _evidence("That is untrue."))
        assert rule.verdict == VerdictLabel.TRUE


class TestCiteEvidence:
    def test_at_most_five_citations(self):
        citations = cite_evidence(_evidence(*["s"] * 8))
        assert len(citations) == 5
        assert citations[0].source_title == "Source 0"
        assert citations[0].source_url == "https://src.test/0"

    def test_reason_truncated(self):
        citations = cite_evidence(_evidence("a" * 250))
        assert citations[0].reason == "a" * 100


@pytest.mark.asyncio
class TestHeuristicReasoner:
    async def test_empty_evidence(self):
        judgment = await HeuristicReasoner(delay=0).judge("Scientists say so", [])

        assert judgment.verdict == VerdictLabel.UNVERIFIED
        assert judgment.confidence == 0
        assert judgment.summary == NO_SOURCES_SUMMARY
        assert judgment.explanation == UNVERIFIABLE_EXPLANATION
        assert judgment.evidence == []
        assert judgment.methods == ["web_search"]

    async def test_matched_rule(self):
        judgment = await HeuristicReasoner(delay=0).judge("claim", _evidence("The claim is misleading."))

        assert judgment.verdict == VerdictLabel.FALSE
        assert judgment.confidence == 75
        assert judgment.explanation == "Multiple sources indicate this claim is false or misleading."
        assert judgment.summary == judgment.explanation
        assert judgment.methods == ["web_search", "heuristic_analysis"]
        assert len(judgment.evidence) == 1

    async def test_deterministic(self):
        reasoner = HeuristicReasoner(delay=0)
        evidence = _evidence("unclear picture")
        first = await reasoner.judge("claim", evidence)
        second = await reasoner.judge("claim", evidence)
        assert first == second

    async def test_sleeps_before_judging(self, monkeypatch):
        sleeps = []

        async def fake_sleep(delay):
            sleeps.append(delay)

        monkeypatch.setattr("services.heuristics.asyncio.sleep", fake_sleep)
        await HeuristicReasoner(delay=0.8).judge("claim", [])
        assert sleeps == [0.8]

    async def test_methods_not_shared_between_judgments(self):
        reasoner = HeuristicReasoner(delay=0)
        first = await reasoner.judge("claim", _evidence("unclear picture"))
        first.methods.append("tampered")

        second = await reasoner.judge("claim", _evidence("unclear picture"))

        assert second.methods == ["web_search", "heuristic_analysis"]
        assert HeuristicReasoner.methods == ("web_search", "heuristic_analysis")
        assert ReasoningSource.methods == ()
