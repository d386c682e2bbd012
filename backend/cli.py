"""CLI entry point: gitpet (also usable as a `gh pet` extension).

Subcommands:
    gitpet feed              # Sync the last 7 days of GitHub activity
    gitpet status            # Show the pet
    gitpet prompt            # One-line segment for a shell prompt
    gitpet suggest -n 3      # Commit-message ideas in the pet's voice
    gitpet post-commit       # Called from the git hook after each commit
    gitpet install-hook      # Install that hook in the current repository
    gitpet install-prompt    # Add the prompt segment to ~/.zshrc or ~/.bashrc
"""

import asyncio
import logging
import os
import random
import shutil
import sys
from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv

import keeper
import settings
from models.pet import PetState
from render.art import color_for
from render.suggestions import DEFAULT_COUNT, render_suggestions
from render.text import render_feed_report, render_post_commit, render_prompt, render_status
from sources.github import EventSourceError
from sources.workspace import git_dir
from store import StateStore, StateStoreError

logger = logging.getLogger(__name__)

HOOK_MARKER = "GitPet"
PROMPT_MARKER = "GitPet prompt"


def _executable() -> str:
    return shutil.which("gitpet") or os.path.abspath(sys.argv[0])


def _echo_card(state: PetState, text: str) -> None:
    click.echo(click.style(text, fg=color_for(state.evolution)))


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Debug logging on stderr.")
@click.option(
    "--state-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="State file (default: $GITPET_STATE_PATH or ~/.config/gh/gh-pet.json).",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, state_file: Optional[Path]) -> None:
    """GitPet: a terminal pet that lives on your GitHub activity."""
    load_dotenv()
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = StateStore(state_file)


@main.command()
@click.option("--login", default=None, help="GitHub login (default: gh CLI user).")
@click.pass_obj
def feed(store: StateStore, login: Optional[str]) -> None:
    """Feed the pet with the last week of GitHub activity."""
    try:
        state = keeper.feed(store, login=login)
    except (EventSourceError, StateStoreError) as e:
        raise click.ClickException(str(e))
    _echo_card(state, render_feed_report(state, random.Random()))


@main.command()
@click.pass_obj
def status(store: StateStore) -> None:
    """Show the pet's current status."""
    try:
        state = keeper.status(store)
    except StateStoreError as e:
        raise click.ClickException(str(e))
    _echo_card(state, render_status(state, random.Random(), count_issues=settings.count_issues()))


@main.command()
@click.pass_obj
def prompt(store: StateStore) -> None:
    """Print a compact prompt segment. Never fails."""
    try:
        state = store.load()
    except StateStoreError as e:
        logger.debug("prompt falling back to default pet: %s", e)
        state = PetState()
    click.echo(render_prompt(state), nl=False)


@main.command()
@click.option("-n", "--count", default=DEFAULT_COUNT, show_default=True, type=click.IntRange(min=1))
@click.pass_obj
def suggest(store: StateStore, count: int) -> None:
    """Suggest commit messages in the pet's voice."""
    try:
        state, messages = asyncio.run(keeper.suggest(store, count))
    except StateStoreError as e:
        raise click.ClickException(str(e))
    click.echo(render_suggestions(state, messages))


@main.command("post-commit")
@click.pass_obj
def post_commit(store: StateStore) -> None:
    """Reward the latest commit (run by the git hook)."""
    try:
        state, subject = keeper.post_commit(store)
    except StateStoreError as e:
        raise click.ClickException(str(e))
    click.echo()
    _echo_card(state, render_post_commit(state, subject, random.Random()))


@main.command("install-hook")
def install_hook() -> None:
    """Install a post-commit hook in the current repository."""
    found = git_dir()
    if found is None:
        raise click.ClickException("not a git repository")

    hook_path = found / "hooks" / "post-commit"
    hook = (
        "#!/usr/bin/env bash\n"
        f"# {HOOK_MARKER} post-commit hook: auto-feed & show status\n"
        f'"{_executable()}" post-commit\n'
    )

    hook_path.parent.mkdir(parents=True, exist_ok=True)
    if hook_path.exists():
        existing = hook_path.read_text(encoding="utf-8")
        if HOOK_MARKER in existing:
            click.secho(f"✓ GitPet hook already installed at {hook_path}", fg="green")
            return
        # keep whatever the repository already runs after a commit
        hook = existing.rstrip("\n") + "\n\n" + hook.split("\n", 1)[1]

    hook_path.write_text(hook, encoding="utf-8")
    hook_path.chmod(0o755)
    click.secho("✓ GitPet post-commit hook installed!", fg="green")
    click.echo(f"  → {hook_path}")
    click.echo("  GitPet will now auto-show after every commit 🐾")


@main.command("install-prompt")
@click.pass_obj
def install_prompt(store: StateStore) -> None:
    """Show the pet in your shell prompt."""
    zsh = "zsh" in os.environ.get("SHELL", "")
    rc_file = Path.home() / (".zshrc" if zsh else ".bashrc")

    snippet = (
        "\n"
        f"# {PROMPT_MARKER}: shows pet status in your terminal\n"
        "gitpet_prompt() {\n"
        "  local pet\n"
        f'  pet=$("{_executable()}" prompt 2>/dev/null)\n'
        '  if [[ -n "$pet" ]]; then\n'
        '    echo "$pet "\n'
        "  fi\n"
        "}\n"
    )
    if zsh:
        snippet += "setopt PROMPT_SUBST\nRPROMPT='$(gitpet_prompt)'\n"
    else:
        snippet += "PS1='$(gitpet_prompt)'\"$PS1\"\n"

    if rc_file.exists() and PROMPT_MARKER in rc_file.read_text(encoding="utf-8"):
        click.secho(f"✓ GitPet prompt already installed in {rc_file}", fg="green")
        return

    with rc_file.open("a", encoding="utf-8") as f:
        f.write(snippet)

    click.secho(f"✓ GitPet prompt installed in {rc_file}", fg="green")
    if zsh:
        click.echo("  GitPet will show in RPROMPT (right side)")
    else:
        click.echo("  GitPet will show at the start of your prompt")
    click.echo(f"  Run: source {rc_file}")
    try:
        state = store.load()
    except StateStoreError:
        state = PetState()
    click.echo(f"\n  Preview: {render_prompt(state)}")


if __name__ == "__main__":
    main()
