from __future__ import annotations

from typing import Callable

import pytest

GO_MOD = """\
module example.com/app

go 1.21

require (
\tgithub.com/acme/widgets v1.2.3
\tgithub.com/acme/gears v0.4.0 // indirect
\tgolang.org/x/text v0.14.0
)

require github.com/acme/bolts v2.0.0+incompatible
"""

PROXY_LISTS = {
    "github.com/acme/widgets": "v1.2.3\nv1.3.0\nv2.0.0\nv1.2.4\ngarbage\n\n",
    "golang.org/x/text": "v0.13.0\nv0.14.0\n",
    "github.com/acme/bolts": "v2.0.0+incompatible\nv3.0.0+incompatible\nv2.1.0+incompatible\n",
}


@pytest.fixture
def fake_fetch() -> Callable[[str], str]:
    calls: list[str] = []

    def fetch(path: str) -> str:
        calls.append(path)
        return PROXY_LISTS.get(path, "")

    fetch.calls = calls  # type: ignore[attr-defined]
    return fetch


@pytest.fixture
def go_mod_file(tmp_path):
    path = tmp_path / "go.mod"
    path.write_text(GO_MOD, encoding="utf-8")
    return path
