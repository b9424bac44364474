"""Local backend wrapping the deterministic scoring engine"""

import asyncio
from typing import Awaitable, Callable

from credit_gateway.domain.models import AssessmentOutcome, FinancialProfile
from credit_gateway.domain.scoring import derive_seed, score_profile, simulated_latency_ms
from credit_gateway.utils.random_utils import seeded_rand


class SimulatedAssessor:
    """Scores profiles in-process, optionally pausing to mimic a network call"""

    backend = "simulated"

    def __init__(
        self,
        simulate_latency: bool = True,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.simulate_latency = simulate_latency
        self._sleep = sleep

    async def assess(self, profile: FinancialProfile) -> AssessmentOutcome:
        """
        Score a profile. Never fails.

        The delay comes from the fifth draw of the profile's own stream, after
        the score and metric draws, so it does not disturb the result.
        """
        rand = seeded_rand(derive_seed(profile))
        result = score_profile(profile, rand)

        if self.simulate_latency:
            await self._sleep(simulated_latency_ms(rand) / 1000)

        return AssessmentOutcome.success(result)
