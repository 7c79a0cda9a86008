"""CLI for mirroring a user's repositories into a local directory."""

from __future__ import annotations

import logging

import typer
from typer.core import TyperCommand

from ...config.settings import get_settings
from ...core.errors import MirrorError
from ...core.git_client import GitClient
from ...core.github_client import GitHubClient
from ...core.types import MirrorConfig
from ...core.utils import parse_bool, split_names
from ...logging_config import setup_logging
from .service import mirror_all

logger = logging.getLogger(__name__)

USAGE_EXAMPLE = "\t ghmirror -user mpl -token oauthTokenHere\n"


class BoolValueCommand(TyperCommand):
    """Command that also accepts `-flag=true` / `-flag=false` for boolean flags.

    `-forks=false` becomes `-no-forks`; a false value on a flag without an off
    switch is dropped. Arguments after `--` are left alone.
    """

    def _bool_flags(self) -> dict[str, str | None]:
        flags: dict[str, str | None] = {}
        for param in self.params:
            if not getattr(param, "is_flag", False):
                continue
            off = list(getattr(param, "secondary_opts", []))
            for i, opt in enumerate(param.opts):
                flags[opt] = off[i] if i < len(off) else None
        return flags

    def parse_args(self, ctx: typer.Context, args: list[str]) -> list[str]:
        flags = self._bool_flags()
        rewritten: list[str] = []
        for i, arg in enumerate(args):
            if arg == "--":
                rewritten.extend(args[i:])
                break
            name, sep, value = arg.partition("=")
            if not sep or name not in flags:
                rewritten.append(arg)
                continue
            try:
                on = parse_bool(value)
            except ValueError as e:
                raise typer.BadParameter(str(e), param_hint=f"'{name}'") from e
            if on:
                rewritten.append(name)
            elif flags[name]:
                rewritten.append(flags[name])
        return super().parse_args(ctx, rewritten)


def _usage(ctx: typer.Context, value: bool) -> None:
    """Print usage on stderr and exit 2, like any other usage error."""
    if not value or ctx.resilient_parsing:
        return
    typer.echo(USAGE_EXAMPLE + ctx.get_help(), err=True)
    raise typer.Exit(code=2)


def mirror(
    help_: bool = typer.Option(
        False, "-h", "--help", is_eager=True, callback=_usage, help="Show this help"
    ),
    user: str = typer.Option("", "-user", "--user", help="GitHub username"),
    token: str | None = typer.Option(
        None,
        "-token",
        "--token",
        help="OAuth token. Generate a personal API token at https://github.com/settings/tokens "
        "(env GITHUB_TOKEN used if not set)",
        show_default=False,
    ),
    forks: bool = typer.Option(
        False, "-forks/-no-forks", "--forks/--no-forks", help="Fetch forked repos as well (-forks=false also accepted)"
    ),
    repo: str = typer.Option(
        "", "-repo", "--repo", help="Additional repo name(s), comma separated, to fetch even though -forks says not to"
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose"),
    dest: str | None = typer.Option(None, "-dest", "--dest", help="Directory holding the mirrors (default: cwd)"),
):
    """Clone or pull every repository owned by a GitHub user."""
    s = get_settings()
    _token = token if token is not None else s.github_token
    if not user:
        raise typer.BadParameter("a GitHub username is required", param_hint="'-user'")
    if not _token:
        raise typer.BadParameter("a token is required", param_hint="'-token'")

    config = MirrorConfig(
        user=user,
        token=_token,
        include_forks=forks,
        extra_repos=split_names(repo),
        verbose=verbose,
        dest=dest or s.default_dest,
    )
    setup_logging(config.verbose)
    github = GitHubClient(config.token, api_base=s.api_base, timeout=s.http_timeout)
    git = GitClient(s.git_bin)

    try:
        mirror_all(config, github, git)
    except (MirrorError, OSError) as e:
        logger.error("%s", e)
        raise typer.Exit(code=1) from e
