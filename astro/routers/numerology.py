from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from astro.core.errors import ValidationError
from astro.domain.schemas import MeaningsIn, NumerologyCalculateIn, SystemIn
from astro.routers.dependencies import get_catalog_service, get_meaning_service, get_reading_service
from astro.services.catalog_service import CatalogService
from astro.services.meaning_service import MeaningService
from astro.services.reading_service import ReadingService

router = APIRouter(prefix="/api/numerology", tags=["numerology"])


@router.post("/calculate")
async def calculate(body: NumerologyCalculateIn, readings: ReadingService = Depends(get_reading_service)):
    numbers = body.numbers.model_dump(by_alias=True) if body.numbers is not None else None
    data = await readings.calculate(body.full_name, body.date, numbers, body.phone_number)
    return {"success": True, "data": data}


@router.get("/history/{phone}")
def history(
    phone: str,
    limit: int = Query(10, ge=0),
    offset: int = Query(0, ge=0),
    readings: ReadingService = Depends(get_reading_service),
):
    results = readings.history(phone, limit=limit, offset=offset)
    return {"success": True, "data": results, "total": len(results)}


@router.get("/result/{reading_id}")
def get_result(reading_id: int, readings: ReadingService = Depends(get_reading_service)):
    return {"success": True, "data": readings.get_numerology(reading_id)}


@router.delete("/result/{reading_id}")
def delete_result(reading_id: int, readings: ReadingService = Depends(get_reading_service)):
    readings.delete_numerology(reading_id)
    return {"success": True, "message": "Result deleted successfully"}


@router.get("/system")
def list_systems(catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.list_systems("numerology")


# -------------------------------------- meanings --------------------------------------
@router.get("/meanings/{number}")
async def get_meanings(number: int, meanings: MeaningService = Depends(get_meaning_service)):
    return {"number": number, "meanings": await meanings.numerology_meanings(number)}


@router.post("/meanings/{number}")
async def save_meanings(number: int, body: MeaningsIn, meanings: MeaningService = Depends(get_meaning_service)):
    if body.meanings is None:
        raise ValidationError("Meanings must be a list.")
    updated, total = await meanings.save_numerology_meanings(number, body.meanings)
    return {
        "message": f"Successfully updated {updated}/{total} meanings for {number}",
        "number": number,
        "updated": updated,
    }


@router.delete("/meanings/{table}/{number}")
def delete_meaning(table: str, number: int, meanings: MeaningService = Depends(get_meaning_service)):
    meanings.delete_numerology_meaning(table, number)
    return {"message": "Meaning deleted successfully"}


# -------------------------------------- readings --------------------------------------
@router.get("/readings")
def list_readings(readings: ReadingService = Depends(get_reading_service)):
    return readings.list_numerology()


@router.get("/readings/phone/{phone}")
def readings_by_phone(phone: str, readings: ReadingService = Depends(get_reading_service)):
    return readings.numerology_by_phone(phone)


@router.get("/readings/{reading_id}")
def get_reading(reading_id: int, readings: ReadingService = Depends(get_reading_service)):
    return readings.get_numerology(reading_id, missing_message="Numerology reading not found")


# -------------------------------------- systems --------------------------------------
@router.post("", status_code=201)
def create_system(body: SystemIn, catalog: CatalogService = Depends(get_catalog_service)):
    system_id = catalog.create_system("numerology", body.name, body.description)
    return {"message": "Numerology system added successfully", "id": system_id}


@router.put("/{system_id}")
def update_system(system_id: int, body: SystemIn, catalog: CatalogService = Depends(get_catalog_service)):
    catalog.update_system("numerology", system_id, body.name, body.description)
    return {"message": "System updated successfully"}


@router.delete("/{system_id}")
def delete_system(system_id: int, catalog: CatalogService = Depends(get_catalog_service)):
    catalog.delete_system("numerology", system_id)
    return {"message": "System deleted successfully"}
