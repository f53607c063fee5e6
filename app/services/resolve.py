"""
Turn a provider outcome into the final GenerationResult.

Unparsable provider text and an unavailable provider each get their own templated
message, so a caller can tell "the model answered badly" from "no model answered".
"""
import json
import logging
import re
from typing import Any

from app.models.prospect import ProfileSignals
from app.models.tov_config import ToneProfile
from app.schemas.generate import ConfidenceScores, GenerationResult, ProspectAnalysisOutput
from app.services.ai import ProviderResult

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"
FALLBACK_PROVIDER = "Fallback"

OFFLINE_MESSAGE = (
    "Hi {name}, I found your LinkedIn profile and would like to discuss how we help "
    "companies automate their sales processes. Interested in a brief call?"
)
UNPARSABLE_MESSAGE = "Hi {name}, interested in discussing sales automation for your team?"

OFFLINE_SCORES = ConfidenceScores(overall=0.5, personalization=0.3, tone=0.5)

_JSON_FENCE_RE = re.compile(r"```json\s*([\s\S]*?)\s*```")


def _parse_json_from_content(content: str) -> Any:
    """Parse model output as JSON; a ```json fenced block is unwrapped first."""
    text = content
    if "```json" in content:
        match = _JSON_FENCE_RE.search(content)
        if match:
            text = match.group(1)
    return json.loads(text)


def _message_text(item: Any) -> str | None:
    if isinstance(item, str):
        return item
    if isinstance(item, dict) and isinstance(item.get("content"), str):
        return item["content"]
    return None


def parse_messages(content: str, name: str, sequence_length: int) -> list[str]:
    """Messages from the provider's JSON, truncated to sequence_length, or one templated message."""
    try:
        data = _parse_json_from_content(content)
    except (ValueError, RecursionError) as e:
        logger.warning("AI returned invalid JSON: %s", type(e).__name__)
        data = None

    raw = data.get("messages") if isinstance(data, dict) else None
    if isinstance(raw, list):
        messages = [text for text in map(_message_text, raw) if text is not None]
        return messages[: max(sequence_length, 0)]

    logger.warning("AI response has no messages list, using templated message")
    return [UNPARSABLE_MESSAGE.format(name=name)]


def build_insights(data: ProfileSignals) -> list[str]:
    insights = []
    if data.title and data.company:
        insights.append(f"Works as {data.title} at {data.company}")
    elif data.title:
        insights.append(f"Role: {data.title}")
    elif data.company:
        insights.append(f"Works at {data.company}")

    if data.location:
        insights.append(f"Based in {data.location}")
    if data.experience:
        insights.append(f"Experience: {data.experience[0]}")
    if data.skills:
        insights.append(f"Skills include: {', '.join(data.skills[:3])}")

    if not insights:
        insights = ["Name extracted from LinkedIn URL", "Limited profile data available"]
    return insights


def _prospect_analysis(data: ProfileSignals) -> ProspectAnalysisOutput:
    return ProspectAnalysisOutput(
        name=data.name,
        role=data.title or UNKNOWN,
        company=data.company or UNKNOWN,
        insights=build_insights(data),
    )


def _extraction_summary(data: ProfileSignals) -> str:
    title = f"title ({data.title})" if data.title else "no title"
    company = f"company ({data.company})" if data.company else "no company"
    location = f"location ({data.location})" if data.location else "no location"
    return f"{title}, {company}, {location}"


def resolve_response(
    outcome: ProviderResult,
    data: ProfileSignals,
    tone: ToneProfile,
    sequence_length: int,
) -> GenerationResult:
    if not outcome.available:
        return GenerationResult(
            messages=[OFFLINE_MESSAGE.format(name=data.name)],
            thinking_process="AI unavailable, using simple fallback",
            confidence_scores=OFFLINE_SCORES,
            prospect_analysis=_prospect_analysis(data),
            using_mock=True,
            ai_provider=FALLBACK_PROVIDER,
        )

    return GenerationResult(
        messages=parse_messages(outcome.text, data.name, sequence_length),
        thinking_process=(
            f"Generated using {outcome.provider} AI with tone: {tone.describe()}. "
            f"Extracted: {_extraction_summary(data)}."
        ),
        confidence_scores=ConfidenceScores(
            overall=0.85,
            personalization=0.9 if data.title and data.company else 0.7,
            tone=0.95 if tone.formality > 0.8 else 0.85,
        ),
        prospect_analysis=_prospect_analysis(data),
        using_mock=False,
        ai_provider=outcome.provider,
    )
