import pytest

from app.models.prospect import ProfileSignals
from app.prompts.tov import normalize_tov
from app.services.ai import UNAVAILABLE, ProviderResult
from app.services.resolve import build_insights, parse_messages, resolve_response

JOHN = ProfileSignals(name="John Doe")
ANA = ProfileSignals(
    name="Ana Costa",
    title="Backend Developer",
    company="Acme",
    location="Lisbon",
    experience=["8 years of experience"],
)


def test_unavailable_uses_offline_fallback():
    result = resolve_response(UNAVAILABLE, JOHN, normalize_tov(), 3)

    assert result.using_mock is True
    assert result.ai_provider == "Fallback"
    assert len(result.messages) == 1
    assert "John Doe" in result.messages[0]
    assert result.thinking_process == "AI unavailable, using simple fallback"
    scores = result.confidence_scores
    assert (scores.overall, scores.personalization, scores.tone) == (0.5, 0.3, 0.5)
    assert result.prospect_analysis.role == "Unknown"
    assert result.prospect_analysis.company == "Unknown"


def test_parsed_messages_are_truncated_to_requested_count():
    outcome = ProviderResult(text='{"messages": ["one", "two", "three", "four"]}', provider="Gemini")
    result = resolve_response(outcome, ANA, normalize_tov(), 2)

    assert result.messages == ["one", "two"]
    assert result.using_mock is False
    assert result.ai_provider == "Gemini"


def test_fenced_json_is_unwrapped():
    content = 'Here you go:\n```json\n{"messages": ["hello there"]}\n```\nThanks'
    assert parse_messages(content, "John Doe", 3) == ["hello there"]


def test_message_objects_with_content_are_accepted():
    content = '{"messages": [{"step": 1, "content": "first"}, 42, "second"]}'
    assert parse_messages(content, "John Doe", 5) == ["first", "second"]


@pytest.mark.parametrize(
    "content",
    [
        "not json at all",
        '{"messages": "just a string"}',
        '["a", "b"]',
        '{"thinking_process": "x"}',
        "```json\n{broken\n```",
        "[" * 100000 + "]" * 100000,
    ],
)
def test_unparsable_text_gives_single_templated_message(content):
    outcome = ProviderResult(text=content, provider="OpenAI")
    result = resolve_response(outcome, JOHN, normalize_tov(), 3)

    assert result.messages == ["Hi John Doe, interested in discussing sales automation for your team?"]
    assert result.using_mock is False
    assert result.ai_provider == "OpenAI"


def test_confidence_scores_when_provider_available():
    outcome = ProviderResult(text='{"messages": []}', provider="Gemini")

    rich = resolve_response(outcome, ANA, normalize_tov(formality=0.9), 3).confidence_scores
    assert (rich.overall, rich.personalization, rich.tone) == (0.85, 0.9, 0.95)

    sparse = resolve_response(outcome, JOHN, normalize_tov(formality=0.8), 3).confidence_scores
    assert (sparse.overall, sparse.personalization, sparse.tone) == (0.85, 0.7, 0.85)


def test_thinking_process_summarizes_signals():
    outcome = ProviderResult(text='{"messages": ["x"]}', provider="Gemini")
    result = resolve_response(outcome, ANA, normalize_tov(), 1)

    assert result.thinking_process == (
        "Generated using Gemini AI with tone: professional, professional, moderately direct. "
        "Extracted: title (Backend Developer), company (Acme), location (Lisbon)."
    )


def test_insights():
    assert build_insights(ANA) == [
        "Works as Backend Developer at Acme",
        "Based in Lisbon",
        "Experience: 8 years of experience",
    ]
    assert build_insights(ProfileSignals(name="X Y", title="CTO")) == ["Role: CTO"]
    assert build_insights(ProfileSignals(name="X Y", company="Acme")) == ["Works at Acme"]
    assert build_insights(JOHN) == ["Name extracted from LinkedIn URL", "Limited profile data available"]
