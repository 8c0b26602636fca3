"""Pytest configuration for the botstrings test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 200 examples
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=200,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def resource_dir(tmp_path: Path) -> Path:
    """Directory with an English, a German and a malformed response file."""
    (tmp_path / "responses.en-US.json").write_text(
        '{\n'
        '  "afk_set": "AFK set: {0}",\n'
        '  "greeting": "Hello {0}, you have {1} items",\n'
        '  "error_code": "Error code: {2}",\n'
        '  "ping": "Pong!"\n'
        '}\n',
        encoding="utf-8",
    )
    (tmp_path / "responses.de-DE.json").write_text(
        '{"afk_set": "AFK gesetzt: {0}", "only_german": "Nur {0}"}',
        encoding="utf-8",
    )
    (tmp_path / "responses.fr-FR.json").write_text('{"ping": "Po', encoding="utf-8")
    (tmp_path / "commands.en-US.yml").write_text("ping:\n  desc: Ping\n", encoding="utf-8")
    return tmp_path
