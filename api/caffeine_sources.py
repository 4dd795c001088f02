"""Caffeine sources API router.

Exposes the catalogue of common caffeinated products so the tracker form can
turn a product and a number of servings into a dose.
"""

from typing import List, Optional

from fastapi import APIRouter

from core.logger import get_logger
from schemas import CaffeineSource
from services.intake_calculator import intake_calculator

logger = get_logger("api.caffeine_sources")
router = APIRouter(prefix="/api", tags=["caffeine"])


@router.get("/caffeine-sources", response_model=List[CaffeineSource])
def list_caffeine_sources(category: Optional[str] = None):
    """Return catalogue entries, optionally restricted to one category.

    Args:
        category: Category name such as ``Coffee`` or ``Tea`` (case-insensitive).
    """
    sources = intake_calculator.caffeine_sources(category)
    logger.info("Listed %s caffeine sources (category=%s)", len(sources), category)
    return sources


@router.get("/caffeine-sources/dose")
def caffeine_dose(name: str, servings: float = 1):
    """Return the caffeine in `servings` of a catalogue product.

    Raises:
        NotFoundError: If no catalogue entry has that name.
    """
    source = intake_calculator.caffeine_source(name)
    return {
        "name": source.name,
        "servings": servings,
        "caffeine_mg": intake_calculator.dose_for(source.name, servings),
    }
