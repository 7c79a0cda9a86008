"""Errors raised while mirroring. The CLI maps them to exit codes."""


class MirrorError(RuntimeError):
    pass


class GitHubError(MirrorError):
    pass


class GitError(MirrorError):
    pass
