from __future__ import annotations

from fastapi import APIRouter, Depends

from astro.core.errors import NotFoundError, ValidationError
from astro.domain.schemas import AstrologyResultIn, MeaningsIn, SystemIn
from astro.routers.dependencies import get_catalog_service, get_meaning_service, get_reading_service
from astro.services.catalog_service import CatalogService
from astro.services.meaning_service import MeaningService
from astro.services.reading_service import ReadingService

router = APIRouter(prefix="/api/astrology", tags=["astrology"])

# Fixed paths are declared before the catch-all "/{planet}/{zodiac}" and "/{system_id}" routes.


@router.get("/system")
def list_systems(catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.list_systems("astrology")


# -------------------------------------- readings --------------------------------------
@router.post("/save-results", status_code=201)
def save_results(body: AstrologyResultIn, readings: ReadingService = Depends(get_reading_service)):
    return readings.save_astrology(body.model_dump(by_alias=True))


@router.get("/user-results")
def user_results(readings: ReadingService = Depends(get_reading_service)):
    return readings.list_astrology()


@router.get("/user-results/{phone}")
def user_results_by_phone(phone: str, readings: ReadingService = Depends(get_reading_service)):
    results = readings.astrology_by_phone(phone)
    if not results:
        raise NotFoundError("No results found for this phone number")
    return results


@router.delete("/user-results/{reading_id}")
def delete_user_result(reading_id: int, readings: ReadingService = Depends(get_reading_service)):
    readings.delete_astrology(reading_id)
    return {"message": "User result deleted successfully"}


@router.get("/readings")
def list_readings(readings: ReadingService = Depends(get_reading_service)):
    return readings.list_astrology()


@router.get("/readings/phone/{phone}")
def readings_by_phone(phone: str, readings: ReadingService = Depends(get_reading_service)):
    return readings.astrology_by_phone(phone)


@router.get("/readings/{reading_id}")
def get_reading(reading_id: int, readings: ReadingService = Depends(get_reading_service)):
    return readings.get_astrology(reading_id)


# -------------------------------------- meanings --------------------------------------
@router.get("/meanings/{zodiac}")
async def get_meanings(zodiac: str, meanings: MeaningService = Depends(get_meaning_service)):
    return {"zodiac": zodiac, "meanings": await meanings.astrology_meanings(zodiac)}


@router.post("/meanings/{zodiac}")
async def save_meanings(zodiac: str, body: MeaningsIn, meanings: MeaningService = Depends(get_meaning_service)):
    if body.meanings is None:
        raise ValidationError("Meanings must be a list.")
    updated, total = await meanings.save_astrology_meanings(zodiac, body.meanings)
    return {
        "message": f"Successfully updated {updated}/{total} meanings for {zodiac}",
        "zodiac": zodiac,
        "updated": updated,
    }


@router.get("/{planet}/{zodiac}")
def interpretation(planet: str, zodiac: str, meanings: MeaningService = Depends(get_meaning_service)):
    return {"planet": planet, "zodiac": zodiac, "description": meanings.interpretation(planet, zodiac)}


# -------------------------------------- systems --------------------------------------
@router.post("", status_code=201)
def create_system(body: SystemIn, catalog: CatalogService = Depends(get_catalog_service)):
    system_id = catalog.create_system("astrology", body.name, body.description)
    return {"message": "Astrology system added successfully", "id": system_id}


@router.put("/{system_id}")
def update_system(system_id: int, body: SystemIn, catalog: CatalogService = Depends(get_catalog_service)):
    catalog.update_system("astrology", system_id, body.name, body.description)
    return {"message": "System updated successfully"}


@router.delete("/{system_id}")
def delete_system(system_id: int, catalog: CatalogService = Depends(get_catalog_service)):
    catalog.delete_system("astrology", system_id)
    return {"message": "System deleted successfully"}
