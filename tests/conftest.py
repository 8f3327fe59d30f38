"""Shared fixtures for matching tests."""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest


def ensure_src_on_path() -> None:
    root = Path(__file__).resolve().parent.parent
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.append(str(src_path))


ensure_src_on_path()

from models import IngredientInfo, LearnedPattern


@pytest.fixture
def chicken_breast_pattern() -> LearnedPattern:
    return LearnedPattern(
        tokens=("chicken", "breast", "boneless"),
        ingredient_id="ing-chicken-breast",
        ingredient_name="Chicken Breast",
        ingredient_sku="chicken-breast",
        weight=5,
        learned_at=datetime(2026, 3, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def ground_beef_pattern() -> LearnedPattern:
    return LearnedPattern(
        tokens=("ground", "beef"),
        ingredient_id="ing-ground-beef",
        ingredient_name="Ground Beef",
        ingredient_sku="beef-ground",
        weight=3,
        learned_at=datetime(2026, 3, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def protein_catalog() -> list[IngredientInfo]:
    return [
        IngredientInfo("ing-chicken-breast", "Chicken Breast", "chicken-breast", "Proteins"),
        IngredientInfo("ing-chicken-thigh", "Chicken Thigh", "chicken-thigh", "Proteins"),
        IngredientInfo("ing-ground-beef", "Ground Beef 80/20", "beef-ground", "Proteins"),
        IngredientInfo("ing-salmon", "Atlantic Salmon", "salmon-atlantic", "Seafood"),
    ]


@pytest.fixture
def olive_oil() -> IngredientInfo:
    return IngredientInfo(
        "ing-evoo",
        "Extra Virgin Olive Oil",
        "oil-olive-ev",
        "Oils",
        ("EVOO", "Olive Oil"),
    )
