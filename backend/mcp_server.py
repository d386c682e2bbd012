"""GitPet tools over MCP (stdio).

Tools:
    pet_status    current evolution, mood, counters and recent activity
    pet_feed      sync the last 7 days of GitHub activity into the pet
    pet_suggest   commit-message suggestions in the pet's voice
"""

import logging
import random
from typing import Optional

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

import keeper
import settings
from render.suggestions import DEFAULT_COUNT, render_suggestions
from render.text import render_feed_report, render_status
from sources.github import EventSourceError
from store import StateStore, StateStoreError

logger = logging.getLogger(__name__)


def create_pet_mcp(store: Optional[StateStore] = None, rng: Optional[random.Random] = None) -> FastMCP:
    """Create a FastMCP server exposing the pet tools.

    *store* and *rng* are captured by closure; tools take no state arguments.
    """
    mcp = FastMCP("gitpet")
    store = store or StateStore()
    rng = rng or random.Random()

    @mcp.tool()
    def pet_status() -> str:
        """Show GitPet's current status: evolution, mood, kindness, logic shards, and recent activity summary."""
        try:
            state = keeper.status(store)
        except StateStoreError as e:
            raise ToolError(f"Failed to load state: {e}") from e
        return render_status(state, rng, count_issues=settings.count_issues())

    @mcp.tool()
    def pet_feed() -> str:
        """Feed GitPet by syncing your recent GitHub activity (commits, PRs, reviews) from the last 7 days. Updates mood, evolution, and stats."""
        try:
            state = keeper.feed(store)
        except EventSourceError as e:
            raise ToolError(f"Failed to fetch events: {e}") from e
        except StateStoreError as e:
            raise ToolError(f"Failed to save state: {e}") from e
        return render_feed_report(state, rng)

    @mcp.tool()
    async def pet_suggest(count: int = DEFAULT_COUNT) -> str:
        """Get creative git commit message suggestions from GitPet based on its current personality and mood."""
        if count <= 0:
            count = DEFAULT_COUNT
        try:
            state, messages = await keeper.suggest(store, count)
        except StateStoreError as e:
            raise ToolError(f"Failed to load state: {e}") from e
        return render_suggestions(state, messages)

    return mcp


def main() -> None:
    load_dotenv()
    # stdout carries the protocol; logs go to stderr
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    create_pet_mcp().run()


if __name__ == "__main__":
    main()
