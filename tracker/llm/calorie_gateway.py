"""
Calorie estimates from an OpenAI chat model, with a deterministic fallback.

The gateway makes exactly one attempt per request. Missing credentials, any
client or network error, and replies that do not contain a positive whole
number all fall back to the local per-minute rate table. Nothing raised by
the upstream call escapes ``CalorieGateway.estimate``.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from loguru import logger
from openai import OpenAI

from tracker.config.constants import TrackerConfig
from tracker.errors import UpstreamEstimationFailure
from tracker.prompts.system_prompt import CALORIE_SYSTEM_PROMPT, calorie_user_prompt
from tracker.tools.activity_utils import estimate_calories

_NUMBER = re.compile(r"-?\d[\d,]*")


def _parse_calories(content: Optional[str]) -> int:
    if not content:
        raise UpstreamEstimationFailure("Model returned an empty reply")
    match = _NUMBER.search(content)
    if not match:
        snippet = content[:80].replace("\n", " ")
        raise UpstreamEstimationFailure(f"Model reply has no number: {snippet!r}")
    calories = int(match.group(0).replace(",", ""))
    if calories <= 0:
        raise UpstreamEstimationFailure(f"Model returned a non-positive estimate: {calories}")
    return calories


class CalorieGateway:
    def __init__(
        self,
        client: Optional[Any] = None,
        model: str = "gpt-3.5-turbo",
        temperature: float = 0.7,
    ) -> None:
        self.client = client
        self.model = model
        self.temperature = temperature

    @classmethod
    def from_config(cls, config: TrackerConfig) -> "CalorieGateway":
        client = None
        if config.openai_api_key:
            client = OpenAI(
                api_key=config.openai_api_key,
                timeout=config.openai_timeout_seconds,
                max_retries=0,
            )
        else:
            logger.info("OPENAI_API_KEY not set; calorie estimates use the local rate table")
        return cls(client=client, model=config.openai_model, temperature=config.openai_temperature)

    @property
    def enabled(self) -> bool:
        return self.client is not None

    def _ask_model(self, workout: str, duration_min: int) -> int:
        completion = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": CALORIE_SYSTEM_PROMPT},
                {"role": "user", "content": calorie_user_prompt(workout, duration_min)},
            ],
            temperature=self.temperature,
        )
        if not completion.choices:
            raise UpstreamEstimationFailure("Model returned no choices")
        return _parse_calories(completion.choices[0].message.content)

    def estimate(self, workout: str, duration_min: int) -> int:
        if not self.enabled:
            return estimate_calories(workout, duration_min)
        try:
            return self._ask_model(workout, duration_min)
        except Exception as exc:
            logger.warning(f"Calorie estimate from {self.model} failed, using fallback: {exc}")
            return estimate_calories(workout, duration_min)
