from app.models.prospect import ProfileSignals
from app.models.tov_config import ToneProfile

SEQUENCE_GENERATION_PROMPT = """Write sales messages for {name}.

AVAILABLE INFORMATION:
{prospect_info}
LinkedIn URL: {prospect_url}

REQUIREMENTS:
✅ Use the verified information above
✅ Personalize based on their role and company if available
✅ Create professional, engaging messages
✅ Tone: {formality}, {warmth}, {directness}
❌ NO fake details beyond what's provided
❌ NO placeholders, NO brackets [ ]

Context: {company_context}

Write {sequence_length} messages that:
1. Use their real name and title/company if known
2. Reference their actual role or industry experience
3. Connect their background to the value proposition: {company_context}
4. Sound professional and well-researched

JSON format:
{{"messages": ["personalized message 1", "personalized message 2"], "thinking_process": "explanation", "confidence_scores": {{"overall": 0.85, "personalization": 0.80, "tone": 0.90}}}}

Be personalized and professional."""


def format_profile(data: ProfileSignals) -> str:
    """Render the present profile fields as labeled lines, in a fixed order."""
    parts = [f"Name: {data.name}"]
    if data.title:
        parts.append(f"Current Title: {data.title}")
    if data.company:
        parts.append(f"Company: {data.company}")
    if data.location:
        parts.append(f"Location: {data.location}")
    if data.experience:
        parts.append(f"Experience: {', '.join(data.experience)}")
    if data.skills:
        parts.append(f"Skills: {', '.join(data.skills)}")
    return "\n".join(parts)


def build_sequence_prompt(
    data: ProfileSignals,
    tone: ToneProfile,
    company_context: str,
    prospect_url: str,
    sequence_length: int,
) -> str:
    return SEQUENCE_GENERATION_PROMPT.format(
        name=data.name,
        prospect_info=format_profile(data),
        prospect_url=prospect_url,
        formality=tone.formality_label,
        warmth=tone.warmth_label,
        directness=tone.directness_label,
        company_context=company_context,
        sequence_length=sequence_length,
    )
