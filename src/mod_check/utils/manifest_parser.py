"""Parse go.mod files into requirement lists."""

from __future__ import annotations

from pathlib import Path

from mod_check.models.module import Requirement


class ManifestError(ValueError):
    """Raised when a go.mod file cannot be read or parsed."""


def _split_comment(line: str) -> tuple[str, str]:
    """Split a line into code and the text of its trailing ``//`` comment."""
    code, sep, comment = line.partition("//")
    return code.strip(), comment.strip() if sep else ""


def _is_indirect(comment: str) -> bool:
    return comment == "indirect" or comment.startswith("indirect;")


def _unquote(token: str) -> str:
    if len(token) >= 2 and token[0] == token[-1] and token[0] in "\"`":
        return token[1:-1]
    return token


def _parse_require(fields: list[str], comment: str, lineno: int) -> Requirement:
    if len(fields) != 2:
        raise ManifestError(f"line {lineno}: usage: require module/path v1.2.3")
    return Requirement(
        path=_unquote(fields[0]),
        version=_unquote(fields[1]),
        indirect=_is_indirect(comment),
    )


def parse_go_mod(text: str) -> list[Requirement]:
    """Return the requirements of a go.mod document in file order.

    Handles single-line ``require`` directives and ``require ( ... )``
    blocks; every other directive is ignored.
    """
    requirements: list[Requirement] = []
    block: str | None = None

    for lineno, line in enumerate(text.splitlines(), 1):
        code, comment = _split_comment(line)
        if not code:
            continue
        fields = code.split()

        if block is not None:
            if fields == [")"]:
                block = None
            elif block == "require":
                requirements.append(_parse_require(fields, comment, lineno))
            continue

        verb, args = fields[0], fields[1:]
        if args == ["("]:
            block = verb
        elif verb == "require":
            requirements.append(_parse_require(args, comment, lineno))

    if block is not None:
        raise ManifestError(f"unterminated {block} block")
    return requirements


def read_go_mod(path: str | Path) -> list[Requirement]:
    """Read and parse a go.mod file from disk."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"cannot read {path}: {exc.strerror or exc}") from exc
    return parse_go_mod(text)
