from __future__ import annotations

from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"

# Markers each verification level leaves out.
SKIPPED_MARKERS: dict[str, tuple[str, ...]] = {
    "fast": ("full", "slow"),
    "standard": ("full",),
    "full": (),
}

_SKIP_REASONS = {
    "full": "requires --verification-level=full",
    "slow": "seeded sweep skipped at --verification-level=fast",
}


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--verification-level",
        action="store",
        default="standard",
        choices=tuple(SKIPPED_MARKERS),
        help=(
            "How much of the property suite to run: fast skips slow and "
            "full sweeps, standard skips full sweeps, full runs everything."
        ),
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    skipped = SKIPPED_MARKERS[config.getoption("--verification-level")]
    for item in items:
        marker = next((m for m in skipped if m in item.keywords), None)
        if marker is not None:
            item.add_marker(pytest.mark.skip(reason=_SKIP_REASONS[marker]))


@pytest.fixture
def golden_path() -> Path:
    return DATA_DIR / "simplify_golden.jsonl"
