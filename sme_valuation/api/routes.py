import json

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Response

from sme_valuation.models.report import SavedValuation, ValuationComparison
from sme_valuation.models.request import CompanyFinancialProfile, SaveValuationRequest
from sme_valuation.models.valuations import ValuationResult
from sme_valuation.api.dependencies import get_history_service
from sme_valuation.services.db_service import HistoryService, InvalidImportError
from sme_valuation.valuation.aggregator import calculate_valuation
from sme_valuation.valuation.reference_data import COMPANY_SIZES, EXAMPLE_COMPANIES, SCENARIOS, SECTORS

router = APIRouter(prefix="/api/valuations", tags=["valuations"])
reference_router = APIRouter(prefix="/api", tags=["reference"])


@router.post("/calculate", response_model=ValuationResult)
async def calculate(profile: CompanyFinancialProfile):
    """Value a company without saving the result."""
    return calculate_valuation(profile)


@router.post("", response_model=SavedValuation)
async def create_valuation(
    body: SaveValuationRequest,
    history: HistoryService = Depends(get_history_service),
):
    """Value a company and store the summary in the history."""
    result = calculate_valuation(body.profile)
    return history.save_valuation(body.profile, result, name=body.name)


@router.get("", response_model=list[dict])
async def list_valuations(history: HistoryService = Depends(get_history_service)):
    """List saved valuations, newest first."""
    return history.list_valuations()


@router.get("/compare", response_model=ValuationComparison)
async def compare_valuations(
    ids: list[str] = Query(...),
    history: HistoryService = Depends(get_history_service),
):
    if len(ids) < 2:
        raise HTTPException(status_code=400, detail="Select at least two valuations to compare")
    comparison = history.compare_valuations(ids)
    if comparison is None:
        raise HTTPException(status_code=404, detail="Valuation not found")
    return comparison


@router.get("/export")
async def export_valuations(history: HistoryService = Depends(get_history_service)):
    return Response(content=history.export_json(), media_type="application/json")


@router.post("/import")
async def import_valuations(
    payload: list[dict] = Body(...),
    history: HistoryService = Depends(get_history_service),
):
    try:
        imported = history.import_json(json.dumps(payload))
    except InvalidImportError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"imported": imported}


@router.get("/{valuation_id}", response_model=SavedValuation)
async def get_valuation(
    valuation_id: str,
    history: HistoryService = Depends(get_history_service),
):
    saved = history.get_valuation(valuation_id)
    if not saved:
        raise HTTPException(status_code=404, detail="Valuation not found")
    return saved


@router.delete("/{valuation_id}")
async def delete_valuation(
    valuation_id: str,
    history: HistoryService = Depends(get_history_service),
):
    deleted = history.delete_valuation(valuation_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Valuation not found")
    return {"status": "deleted"}


@reference_router.get("/reference/sectors")
async def list_sectors():
    return {key: sector.model_dump() for key, sector in SECTORS.items()}


@reference_router.get("/reference/sizes")
async def list_sizes():
    return {key: size.model_dump() for key, size in COMPANY_SIZES.items()}


@reference_router.get("/reference/scenarios")
async def list_scenarios():
    return {key: scenario.model_dump() for key, scenario in SCENARIOS.items()}


@reference_router.get("/examples")
async def list_examples():
    return {key: profile.model_dump() for key, profile in EXAMPLE_COMPANIES.items()}
