"""Claude API client for semantic image curation."""

import logging
import re
from typing import Optional

import httpx

from news_imagery.config import Settings
from news_imagery.core import CuratorError, ImageCurator

logger = logging.getLogger(__name__)

NO_OPINION = "RANDOM"


class ClaudeCurator(ImageCurator):
    """Ask Claude to pick the best matching filename for an article.

    One request per article, no retries: a slow or failed answer simply
    hands the decision to the deterministic tiers.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.api_key = settings.anthropic_api_key
        self.model = settings.curator_model
        self.max_tokens = settings.curator.max_tokens
        self.temperature = settings.curator.temperature
        self.timeout = settings.curator_timeout
        self.base_url = "https://api.anthropic.com/v1"

    async def curate(self, title: str, category: str, candidates: list[str]) -> Optional[str]:
        """Return a filename from ``candidates``, or None for no opinion.

        Raises:
            httpx.HTTPError: Transport failure or non-success status.
            CuratorError: The response carried no usable text.
        """
        if not candidates:
            return None

        prompt = self.build_prompt(title, category, candidates)
        system_prompt = self.settings.prompts.curator.get("system", "")

        response = await self._call_api(prompt=prompt, system=system_prompt)
        answer = self._clean_answer(response)

        if not answer:
            raise CuratorError("Curator returned an empty answer")
        if answer.upper() == NO_OPINION:
            return None
        if answer not in candidates:
            logger.debug(f"Curator answered unknown filename {answer!r} for {title!r}")
            return None
        return answer

    def build_prompt(self, title: str, category: str, candidates: list[str]) -> str:
        prompt_template = self.settings.prompts.curator.get("user", "")
        images = "\n".join(f"{i}. {name}" for i, name in enumerate(candidates, 1))
        return prompt_template.format(title=title, category=category, images=images)

    async def _call_api(self, prompt: str, system: str) -> str:
        """Call Claude API once."""
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.post(
                f"{self.base_url}/messages",
                headers={
                    "x-api-key": self.api_key,
                    "anthropic-version": "2023-06-01",
                    "content-type": "application/json",
                },
                json={
                    "model": self.model,
                    "max_tokens": self.max_tokens,
                    "temperature": self.temperature,
                    "system": system,
                    "messages": [
                        {"role": "user", "content": prompt}
                    ],
                },
            )
            response.raise_for_status()

            try:
                data = response.json()
                return data["content"][0]["text"]
            except (ValueError, KeyError, IndexError, TypeError) as e:
                raise CuratorError(f"Unexpected API response: {e}") from e

    def _clean_answer(self, text: str) -> str:
        """Reduce a model answer to a bare filename."""
        text = re.sub(r"```\w*", "", text or "").strip()
        if not text:
            return ""
        first_line = text.splitlines()[0].strip()
        # "3. some-file.jpg" when the model echoes the list numbering
        first_line = re.sub(r"^\d+\.\s+", "", first_line)
        return first_line.strip("`'\" ")
