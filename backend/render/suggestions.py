"""Built-in commit-message suggestions, one voice per evolution."""

from models.pet import Evolution, PetState
from render.text import mood_descriptor

COMPANION = "Companion"
DEFAULT_COUNT = 5

TEMPLATES = {
    Evolution.PIONEER.value: [
        "🗺️ feat: chart unknown territory in the codebase",
        "⛏️ feat: dig deeper into the codebase mines",
        "🏗️ feat: lay the foundation for the next expedition",
        "🧭 feat: navigate through uncharted logic",
        "🌄 feat: plant a flag on the summit of progress",
        "🔭 feat: discover a new pattern in the wilderness",
        "🚀 feat: launch into unexplored modules",
    ],
    Evolution.GUARDIAN.value: [
        "🛡️ fix: fortify the walls against regression",
        "🔒 fix: seal the breach in input validation",
        "⚔️ fix: defend the tests from flaky behavior",
        "🏰 fix: reinforce the castle of type safety",
        "🗡️ fix: vanquish the lurking null pointer",
        "🛡️ chore: patrol the perimeter of dependencies",
        "⚙️ fix: repair the shield of error handling",
    ],
    Evolution.BARD.value: [
        "📜 docs: compose a ballad of API documentation",
        "🎵 docs: sing the changelog's latest verse",
        "📖 docs: illuminate the README with fresh wisdom",
        "🎭 refactor: perform a dramatic code transformation",
        "🎶 docs: harmonize the inline comments",
        "📝 docs: inscribe the wisdom of edge cases",
        "🎪 docs: narrate the story of this module",
    ],
    Evolution.VOID.value: [
        "🌑 refactor: dissolve unnecessary complexity",
        "✂️ refactor: trim the excess from the void",
        "🕳️ refactor: collapse redundant abstractions",
        "💫 refactor: distill logic to its purest form",
        "🌌 chore: let the void reclaim dead code",
        "⚫ refactor: simplify until nothing remains but clarity",
        "🔮 refactor: reshape the formless into structure",
    ],
    COMPANION: [
        "💡 feat: breathe life into the first feature",
        "🌱 feat: plant the seed of something new",
        "🤝 chore: set up a welcoming project structure",
        "🎯 feat: take the first step on the journey",
        "✨ feat: spark the initial implementation",
    ],
}


def personality_for(state: PetState) -> str:
    if state.evolution == Evolution.LONELY:
        return COMPANION
    return state.evolution.value


def template_suggestions(personality: str, count: int = DEFAULT_COUNT) -> list[str]:
    messages = TEMPLATES.get(personality, TEMPLATES[COMPANION])
    return messages[:max(0, count)]


def render_suggestions(state: PetState, messages: list[str]) -> str:
    header = f"🐾 GitPet ({personality_for(state)}, Mood: {mood_descriptor(state.mood)}) suggests:"
    lines = [header, ""]
    lines += [f"{i}. {message}" for i, message in enumerate(messages, start=1)]
    return "\n".join(lines)
