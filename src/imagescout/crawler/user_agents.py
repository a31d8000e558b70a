"""
User Agent Rotation with Realistic Browser Fingerprints

Provides a fixed pool of realistic browser user agents for search requests.
"""

from __future__ import annotations

import random
from typing import Dict, Iterable, Optional, Tuple

DESKTOP_AGENTS: Tuple[str, ...] = (
    # Chrome
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    # Firefox
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:121.0) Gecko/20100101 Firefox/121.0",
    # Safari
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.1 Safari/605.1.15",
    # Edge
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36 Edg/120.0.0.0",
)

MOBILE_AGENTS: Tuple[str, ...] = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 14_7_1 like Mac OS X) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/14.1.2 Mobile/15E148 Safari/604.1",
    "Mozilla/5.0 (Linux; Android 14; SM-G998B) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Mobile Safari/537.36",
)


class UserAgentRotator:
    """
    Uniform random selection from an immutable pool of user agent strings.

    Selection draws an index into the pool; the rotator keeps no state
    between draws beyond its random source.
    """

    def __init__(
        self,
        include_mobile: bool = True,
        custom_agents: Iterable[str] = (),
        rng: Optional[random.Random] = None,
    ):
        self.include_mobile = include_mobile
        self.desktop_agents = DESKTOP_AGENTS
        self.mobile_agents = MOBILE_AGENTS if include_mobile else ()
        self.custom_agents = tuple(agent for agent in custom_agents if agent.strip())
        self._agents = self.desktop_agents + self.mobile_agents + self.custom_agents
        self._rng = rng or random.Random()

    def get_random_user_agent(self) -> str:
        """Get a user agent chosen uniformly from the whole pool."""
        return self._agents[self._rng.randrange(len(self._agents))]

    def get_all_agents(self) -> Tuple[str, ...]:
        """Get all available user agents."""
        return self._agents

    def get_stats(self) -> Dict[str, int]:
        """Get statistics about available user agents."""
        return {
            "total_agents": len(self._agents),
            "desktop_agents": len(self.desktop_agents),
            "mobile_agents": len(self.mobile_agents),
            "custom_agents": len(self.custom_agents),
        }
