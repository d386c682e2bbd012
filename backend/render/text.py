"""
Text renderers shared by the CLI, the chat extension and the MCP server.

Everything here is a read-only view of PetState. Flavor that depends on
chance (the Pioneer's treasure chest, post-commit praise) draws from the
`rng` argument, so callers decide how random a render is. The Bard's
proverb rotates by day of year.
"""

import random
from datetime import date
from typing import Optional

from models.activity import ActivitySummary
from models.pet import Evolution, PetState
from render.art import art_for, mood_bar, mood_face, prompt_bar, prompt_face

PROVERBS = [
    "Small diffs travel far.",
    "Tests are lanterns in the fog.",
    "Readability is a form of kindness.",
    "Rename first, refactor second.",
    "Bugs fear patient eyes.",
]

PRAISES = [
    "Nice commit! 🔥",
    "You're on fire! 💪",
    "Keep it up! ✨",
    "Great work! 🌟",
    "Awesome sauce! 🎉",
    "You rock! 🤘",
    "Legendary! ⚡",
    "Brilliant! 💎",
    "Ship it! 🚀",
    "Code warrior! ⚔️",
    "Well done! 🏆",
    "Commit hero! 🦸",
]

TREASURE_ODDS = 5   # one render in five
MAX_COMMIT_SUBJECT = 28


def daily_proverb(today: Optional[date] = None) -> str:
    today = today or date.today()
    return PROVERBS[today.timetuple().tm_yday % len(PROVERBS)]


def random_praise(rng: random.Random) -> str:
    return rng.choice(PRAISES)


def mood_descriptor(mood: int) -> str:
    if mood >= 70:
        return "Radiant"
    if mood >= 40:
        return "Steady"
    if mood > 0:
        return "Faint"
    return "Quiet"


def activity_tone(summary: ActivitySummary, count_issues: bool = False) -> str:
    total = (
        summary.commits + summary.merged_prs + summary.reviews
        + summary.doc_comments + summary.new_repos + summary.refactor_commits
    )
    if count_issues:
        total += summary.issues
    if total >= 20:
        return "🔥 Intensity: blazing. GitPet is thriving in the Cache."
    if total >= 8:
        return "✨ Intensity: steady. GitPet hums with creative heat."
    if total >= 1:
        return "🌱 Intensity: gentle. GitPet feels acknowledged."
    return "💤 Intensity: quiet. GitPet grows a little lonely."


def display_time(ts: str) -> str:
    return ts or "Never"


def render_art(state: PetState, rng: random.Random, today: Optional[date] = None) -> str:
    art = art_for(state.evolution)
    if state.evolution == Evolution.PIONEER and rng.randrange(TREASURE_ODDS) == 0:
        return art + "\n🗝️  Found a tiny treasure chest!"
    if state.evolution == Evolution.GUARDIAN:
        return art + "\n🛡️  Shielding your logs."
    if state.evolution == Evolution.BARD:
        return art + f"\n📜 {daily_proverb(today)}"
    return art


def render_status(
    state: PetState,
    rng: random.Random,
    keeper: Optional[str] = None,
    count_issues: bool = False,
    today: Optional[date] = None,
) -> str:
    activity = state.activity
    counts = (
        f"Activity (7d): Commits {activity.commits}, Merged PRs {activity.merged_prs}, "
        f"Reviews {activity.reviews}, "
    )
    if count_issues:
        counts += f"Issues {activity.issues}, "
    counts += f"Docs/Comments {activity.doc_comments}"

    lines = ["🐾 GitPet Status"]
    if keeper:
        lines.append(f"Keeper: {keeper}")
    lines += [
        f"Evolution: {state.evolution.value}",
        f"Mood: {state.mood} {mood_bar(state.mood)} {mood_face(state.mood)}",
        f"Kindness: {state.kindness} | Logic Shards: {state.logic_shards}",
        f"Last Sync: {display_time(state.last_sync)}",
        counts,
        activity_tone(activity, count_issues),
        render_art(state, rng, today),
    ]
    return "\n".join(lines)


def render_feed_report(state: PetState, rng: random.Random, today: Optional[date] = None) -> str:
    summary = state.activity
    lines = [
        "🍖 Fed GitPet with fresh activity!",
        f"Commits: {summary.commits} | Merged PRs: {summary.merged_prs} | "
        f"Reviews: {summary.reviews} | Docs/Comments: {summary.doc_comments}",
    ]
    if summary.large_commits:
        lines.append("💥 GitPet shakes from a huge push!")
    if summary.merged_prs:
        lines.append("🎆 Fireworks! PRs merged!")
    if summary.thought_fragments:
        lines.append("💭 GitPet senses thought fragments in your working tree.")
    lines += [
        f"Mood: {state.mood} | Kindness: {state.kindness} | Logic Shards: {state.logic_shards}",
        f"Evolution: {state.evolution.value}",
        "",
        render_art(state, rng, today),
    ]
    return "\n".join(lines)


def render_post_commit(
    state: PetState,
    commit_subject: str,
    rng: random.Random,
    today: Optional[date] = None,
) -> str:
    lines = ["╭──── 🐾 GitPet ─────────────────╮"]
    lines += [f"  {line}" for line in render_art(state, rng, today).split("\n")]
    lines += [
        "",
        f"  {mood_face(state.mood)} {random_praise(rng)}",
        f"  Mood: {mood_bar(state.mood)}  +3 ⬆",
    ]
    if commit_subject:
        subject = commit_subject
        if len(subject) > MAX_COMMIT_SUBJECT:
            subject = subject[:MAX_COMMIT_SUBJECT - 3] + "..."
        lines.append(f"  📝 {subject}")
    lines.append("╰────────────────────────────────╯")
    return "\n".join(lines)


def render_prompt(state: PetState) -> str:
    """One-line prompt segment, e.g. '🐾◕‿◕ ███░░ Pioneer'."""
    return f"🐾{prompt_face(state.mood)}{prompt_bar(state.mood)}{state.evolution.value}"
