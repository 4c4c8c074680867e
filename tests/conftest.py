"""
Pytest configuration for snailfish tests.

Provides:
- Hypothesis profiles (select with HYPOTHESIS_PROFILE, default "default")
- Shared puzzle fixtures (the ten-line homework list and its answers)
- An input-file fixture for driver and CLI tests
"""

import os
from pathlib import Path

import pytest
from hypothesis import settings

# =============================================================================
# Hypothesis Configuration
# =============================================================================

settings.register_profile("default", print_blob=True, derandomize=False)
settings.register_profile("ci", print_blob=True, derandomize=True, max_examples=200)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))


# =============================================================================
# Shared Fixtures
# =============================================================================

REPO_ROOT = Path(__file__).resolve().parents[1]

HOMEWORK = [
    "[[[0,[5,8]],[[1,7],[9,6]]],[[4,[1,2]],[[1,4],2]]]",
    "[[[5,[2,8]],4],[5,[[9,9],0]]]",
    "[6,[[[6,2],[5,6]],[[7,6],[4,7]]]]",
    "[[[6,[0,7]],[0,9]],[4,[9,[9,0]]]]",
    "[[[7,[6,4]],[3,[1,3]]],[[[5,5],1],9]]",
    "[[6,[[7,3],[3,2]]],[[[3,8],[5,7]],4]]",
    "[[[[5,4],[7,7]],8],[[8,3],8]]",
    "[[9,3],[[9,9],[6,[4,9]]]]",
    "[[2,[[7,7],7]],[[5,8],[[9,3],[0,2]]]]",
    "[[[[5,2],5],[8,[3,7]]],[[5,[7,5]],[4,4]]]",
]
HOMEWORK_SUM = "[[[[6,6],[7,6]],[[7,7],[7,0]]],[[[7,7],[7,7]],[[7,8],[9,9]]]]"
HOMEWORK_SUM_MAGNITUDE = 4140
HOMEWORK_MAX_PAIR = 3993


@pytest.fixture
def repo_root() -> Path:
    return REPO_ROOT


@pytest.fixture
def homework_lines():
    return list(HOMEWORK)


@pytest.fixture
def homework_file(tmp_path: Path) -> Path:
    f = tmp_path / "input.txt"
    f.write_text("\n".join(HOMEWORK) + "\n", encoding="utf-8")
    return f
