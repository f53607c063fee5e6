"""
Orchestrates: profile scraping -> tone normalization -> prompt -> provider -> response parsing.
"""
import logging

from app.config import Settings
from app.prompts import build_sequence_prompt, normalize_tov
from app.schemas.generate import GenerationResult, TovConfigIn
from app.services.ai import AIService
from app.services.profile import FetchFn, ProfileScraper
from app.services.resolve import resolve_response

logger = logging.getLogger(__name__)


class GenerateSequenceService:
    def __init__(
        self,
        settings: Settings,
        fetch_html: FetchFn | None = None,
        ai: AIService | None = None,
    ) -> None:
        self.settings = settings
        self.scraper = ProfileScraper(fetch_html, timeout=settings.fetch_timeout_seconds)
        self.ai = ai or AIService(settings)

    def status(self) -> bool:
        """Whether a usable provider credential is configured. No network access."""
        return self.ai.is_configured()

    async def run(
        self,
        prospect_url: str,
        tov_config: TovConfigIn | None,
        company_context: str,
        sequence_length: int,
    ) -> GenerationResult:
        # 1) Profile signals (never fails; falls back to the URL slug)
        profile = await self.scraper.scrape(prospect_url)

        # 2) Tone of voice
        tov = tov_config or TovConfigIn()
        tone = normalize_tov(tov.formality, tov.warmth, tov.directness)

        # 3) Prompt
        prompt = build_sequence_prompt(profile, tone, company_context, prospect_url, sequence_length)

        # 4) Provider
        outcome = await self.ai.complete(prompt)
        logger.info(
            "Sequence for %s: provider=%s, title=%s, company=%s",
            profile.name,
            outcome.provider or "Fallback",
            bool(profile.title),
            bool(profile.company),
        )

        # 5) Result
        return resolve_response(outcome, profile, tone, sequence_length)
