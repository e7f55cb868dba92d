"""
Recipe Sheet Parser

Parses the "Recipes" tab (or an exported CSV/Excel copy of it) into
CocktailRecipe models.

Expected columns, in order:
    A: Name, B: Description, C: Method, D: Ingredient, E: Type,
    F: Qty, G: Unit, H: Container

A row with a blank name belongs to the recipe above it (fill-down), so a
recipe is written as one header row followed by one row per ingredient.
"""

import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import pandas as pd

from barprep.models.common import IngredientType
from barprep.models.recipes import CocktailRecipe, Ingredient

logger = logging.getLogger(__name__)

RECIPE_COLUMNS = [
    "name",
    "description",
    "method",
    "ingredient",
    "type",
    "quantity",
    "unit",
    "container",
]

_NUMBER_PATTERN = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+))")


def parse_recipe_rows(rows: Sequence[Sequence[Any]]) -> Tuple[List[CocktailRecipe], List[str]]:
    """
    Parse sheet rows into recipes.

    Args:
        rows: Data rows (header row already removed), short rows allowed

    Returns:
        Tuple of (recipes in first-seen order, list of warning messages)
    """
    warnings: List[str] = []
    recipes: Dict[str, CocktailRecipe] = {}

    last_name = ""
    last_description = ""
    last_method = ""

    for row_number, row in enumerate(rows, start=2):
        name = _cell(row, 0)
        description = _cell(row, 1)
        method = _cell(row, 2)

        # Fill-down: blank name continues the previous recipe
        if not name and last_name:
            name = last_name
        elif name:
            last_name = name
            last_description = description
            last_method = method

        if not name:
            continue

        if name not in recipes:
            recipes[name] = CocktailRecipe(
                id=recipe_id(name),
                name=name,
                english_description=description or last_description,
                method=method or last_method,
            )

        ingredient_name = _cell(row, 3)
        if not ingredient_name:
            continue

        quantity = _parse_number(_cell(row, 5))
        if quantity is None:
            quantity = 0.0
        elif quantity < 0:
            warnings.append(f"Row {row_number}: negative quantity for {ingredient_name}, using 0")
            quantity = 0.0

        container = _parse_number(_cell(row, 7))
        if container is not None and container <= 0:
            container = None

        recipes[name].ingredients.append(Ingredient(
            name=ingredient_name,
            type=IngredientType.parse(_cell(row, 4)),
            quantity_per_drink=quantity,
            unit=_cell(row, 6) or "unit",
            container_size=container,
        ))

    for message in warnings:
        logger.warning(message)

    parsed = list(recipes.values())
    logger.info(f"Parsed {len(parsed)} recipes from {len(rows)} rows")
    return parsed, warnings


def parse_recipe_file(file_path: str) -> Tuple[List[CocktailRecipe], List[str]]:
    """
    Parse a CSV or Excel export of the recipe sheet.

    Raises:
        ValueError: If the file is missing or not a supported format
    """
    path = Path(file_path)

    if not path.exists():
        raise ValueError(f"File not found: {file_path}")

    suffix = path.suffix.lower()
    logger.info(f"Parsing recipe file: {file_path}")

    try:
        if suffix == ".csv":
            df = pd.read_csv(path, dtype=str, keep_default_na=False)
        elif suffix in (".xlsx", ".xls"):
            df = pd.read_excel(path, dtype=str, keep_default_na=False)
        else:
            raise ValueError(f"Unsupported file format: {path.suffix}")
    except ValueError:
        raise
    except Exception as e:
        raise ValueError(f"Failed to read recipe file: {e}")

    if len(df.columns) < 4:
        raise ValueError(
            f"Recipe file needs at least 4 columns ({', '.join(RECIPE_COLUMNS[:4])}), got {len(df.columns)}"
        )

    return parse_recipe_rows(df.values.tolist())


def recipe_id(name: str) -> str:
    """Slug used as the recipe id, e.g. "The Butterfly" -> "the-butterfly"."""
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


def _cell(row: Sequence[Any], index: int) -> str:
    if index >= len(row):
        return ""
    value = row[index]
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    return str(value).strip()


def _parse_number(text: str) -> Optional[float]:
    """Parse a leading number, e.g. "0.75" or "26oz"; None when absent."""
    match = _NUMBER_PATTERN.match(text or "")
    if not match:
        return None
    return float(match.group(1))
