"""Saved filter presets API router.

Built-in presets come from presets.yaml and are read-only; user presets
live in memory for the lifetime of the process.
"""

from fastapi import APIRouter, HTTPException, Query

from orderbrowser.api.models.schemas import CreatePresetRequest, PresetResponse
from orderbrowser.api.services import get_saved_filter_store
from orderbrowser.listview import FilterState, SavedFilter

router = APIRouter()


def _to_response(saved: SavedFilter) -> dict:
    return {
        "id": saved.id,
        "name": saved.name,
        "filters": saved.state.to_dict(),
        "isBuiltIn": saved.built_in,
        "createdAt": saved.created_at.isoformat(),
    }


@router.get("", response_model=list[PresetResponse])
async def list_presets(
    include_built_in: bool = Query(True, description="Include built-in presets"),
):
    """List all filter presets."""
    store = get_saved_filter_store()
    return [_to_response(saved) for saved in store.list(include_built_in=include_built_in)]


@router.get("/{preset_id}", response_model=PresetResponse)
async def get_preset(preset_id: str):
    """Get a single preset by ID."""
    saved = get_saved_filter_store().get(preset_id)
    if saved is None:
        raise HTTPException(status_code=404, detail="Preset not found")
    return _to_response(saved)


@router.post("", status_code=201, response_model=PresetResponse)
async def create_preset(request: CreatePresetRequest):
    """Save a filter state under a name."""
    try:
        state = FilterState.from_dict(request.filters)
    except (TypeError, ValueError) as e:
        raise HTTPException(status_code=400, detail=f"Invalid filters: {e}")

    saved = get_saved_filter_store().save(request.name, state)
    return _to_response(saved)


@router.delete("/{preset_id}", status_code=204)
async def delete_preset(preset_id: str):
    """Delete a preset."""
    store = get_saved_filter_store()
    saved = store.get(preset_id)
    if saved is None:
        raise HTTPException(status_code=404, detail="Preset not found")
    if saved.built_in:
        raise HTTPException(status_code=403, detail="Cannot delete built-in presets")

    store.delete(preset_id)
    return None
