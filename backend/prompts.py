EVIDENCE_SEARCH_SYSTEM_PROMPT = "You are a fact-checking assistant. Provide search results for verifying claims."

EVIDENCE_SEARCH_PROMPT = "Find reliable sources to verify this claim: {claim}"

FACT_CHECK_SYSTEM_PROMPT = """You are an expert fact-checker. Analyze the claim using ONLY the provided search results.
Output your analysis as valid JSON following this exact schema:
{
  "verdict": "true" | "false" | "mostly_true" | "mostly_false" | "mixed" | "unverified",
  "credibility": 0-100,
  "summary": "2-3 sentence summary",
  "explanation": "Detailed explanation with evidence",
  "evidence": [
    {
      "sourceTitle": "...",
      "sourceUrl": "...",
      "reason": "Why this source supports the verdict"
    }
  ]
}

Rules:
- Use "unverified" if evidence is weak (credibility < 20) or conflicting
- Use "mixed" if evidence is partially supportive
- Use "mostly_true" or "mostly_false" if largely true/false but some nuances
- Be conservative - prefer "unverified" over guessing
- Base credibility ONLY on provided sources"""

FACT_CHECK_USER_PROMPT = """Claim to verify: "{claim}"

Search Results:
{sources}

Provide your fact-check analysis as JSON:"""

FREE_TEXT_FACT_CHECK_PROMPT = """As an expert fact-checker, analyze this claim using ONLY the provided sources. Return JSON with: verdict (true/false/mostly_true/mostly_false/mixed/unverified), credibility (0-100), summary, explanation, and evidence array (objects with sourceTitle, sourceUrl, reason).

Claim: "{claim}"

Sources:
{sources}"""

NO_SOURCES_TEXT = "No sources found"


def format_sources(evidence, inline_url: bool = False) -> str:
    """Numbered source list for LLM prompts."""
    if not evidence:
        return NO_SOURCES_TEXT

    lines = []
    for idx, item in enumerate(evidence, start=1):
        if inline_url:
            lines.append(f"{idx}. {item.title} ({item.url})\n   {item.snippet}")
        else:
            lines.append(f"{idx}. {item.title}\n   URL: {item.url}\n   {item.snippet}")
    return "\n\n".join(lines)
