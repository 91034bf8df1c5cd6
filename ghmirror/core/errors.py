"""Error kinds raised by ghmirror and helpers to render them."""

from __future__ import annotations


class MirrorError(RuntimeError):
    """Base for every failure that is not a bug in ghmirror.

    ``context`` holds operation-level messages, outermost first. Adding
    context never changes the kind of the error.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.context: list[str] = []

    def with_context(self, message: str) -> MirrorError:
        self.context.insert(0, message)
        return self

    def __str__(self) -> str:
        return ": ".join([*self.context, self.message])


class TransportError(MirrorError):
    """A subprocess could not be started or waited on."""


class RemoteError(MirrorError):
    """Structured error object returned by the GitHub API."""

    def __init__(self, message: str, documentation_url: str | None = None) -> None:
        text = f"GitHub error: {message}"
        if documentation_url:
            text += f" ({documentation_url})"
        super().__init__(text)
        self.remote_message = message
        self.documentation_url = documentation_url


class ParseError(MirrorError):
    """Malformed JSON, or JSON that does not describe what we expected."""


class ProcessError(MirrorError):
    """A subprocess exited with a non-success status."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


class FilesystemError(MirrorError):
    """The push guard hook could not be created or made executable."""


def error_chain(err: BaseException) -> list[str]:
    """Return the lines describing ``err``, outermost context first."""
    lines: list[str] = []
    current: BaseException | None = err
    while current is not None:
        if isinstance(current, MirrorError):
            lines.extend(current.context)
            lines.append(current.message)
        else:
            lines.append(str(current).strip() or type(current).__name__)
        current = current.__cause__
    return lines
